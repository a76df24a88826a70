"""Flask UI for the fuzzy pinyin engine (python -m frontend --roots DIR)."""
