from __future__ import annotations

TOP_K: int = 20

# Longest full pinyin syllable ("zhuang", "shuang", "chuang")
MAX_PINYIN_LENGTH: int = 6

# Scoring: coverage / head-of-text bonus / fewer fragments
SCORE_COVERAGE: float = 40
SCORE_HEAD: float = 8
SCORE_FRAGMENTS: float = 20

# /* ~~~ match against the full path when names alone give fewer hits ~~~ */
PATH_SEARCH: bool = False
PATH_SEARCH_THRESHOLD: int = 10

# Double pinyin scheme: "full" (no conversion), "xiaohe", "microsoft", "abc"
DOUBLE_PINYIN: str = "full"

# Default romanization source for make_table()
TABLE_SOURCE: str = "pypinyin://"

# File index
FILE_EXTS = [".md"]
ATTACHMENT_EXTS = [
    ".bmp", ".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp",
    ".mp3", ".wav", ".m4a", ".3gp", ".flac", ".ogg", ".oga", ".opus",
    ".mp4", ".webm", ".ogv", ".mov", ".mkv", ".pdf",
]
SHOW_ATTACHMENTS: bool = False
SHOW_ALL_FILE_TYPES: bool = False

# folders to skip
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", ".obsidian", ".trash", "node_modules", "__pycache__"}
