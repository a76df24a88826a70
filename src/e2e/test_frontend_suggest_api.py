import pytest

from fuzzy_pinyin.engine import Engine
from frontend.web import app as flask_app
import frontend.web as webmod


@pytest.fixture
def client(monkeypatch):
    eng = Engine()
    eng.build_names(["中文", "中文标签", "readme"], id="tag")
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_suggest_returns_ranges_and_json_safe_scores(client):
    rv = client.get("/api/suggest?q=zw&k=5")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["query"] == "zw"
    rows = data["results"]
    assert [r["name"] for r in rows] == ["中文", "中文标签"]
    for key in ("name", "payload", "score", "ranges", "field"):
        assert key in rows[0]
    assert rows[0]["score"] is None          # full coverage class
    assert rows[0]["ranges"] == [[0, 1]]
    assert isinstance(rows[1]["score"], float)


@pytest.mark.e2e
def test_suggest_empty_query_lists_items(client):
    rows = client.get("/api/suggest?q=").get_json()["results"]
    assert [r["name"] for r in rows] == ["中文", "中文标签", "readme"]


@pytest.mark.e2e
def test_suggest_follows_keystrokes(client):
    for q in ("r", "re", "rea"):
        rows = client.get(f"/api/suggest?q={q}").get_json()["results"]
    assert [r["name"] for r in rows] == ["readme"]
    assert rows[0]["ranges"] == [[0, 2]]


@pytest.mark.e2e
def test_health_and_home(client):
    h = client.get("/api/health").get_json()
    assert h == {"ok": True, "items": 3}
    r = client.get("/")
    assert r.status_code == 200
    assert "fuzzy pinyin" in r.data.decode("utf-8").lower()


def test_suggest_without_engine(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    rv = flask_app.test_client().get("/api/suggest?q=zw")
    assert rv.status_code == 503
    assert flask_app.test_client().get("/api/health").get_json()["ok"] is False


@pytest.mark.e2e
@pytest.mark.parametrize("k", ["0", "-3"])
def test_suggest_rejects_non_positive_k(client, k):
    rv = client.get(f"/api/suggest?q=zw&k={k}")
    assert rv.status_code == 400
    assert "error" in rv.get_json()
