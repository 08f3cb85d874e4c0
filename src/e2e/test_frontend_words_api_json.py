import pytest
from anagram.engine import Engine
from anagram_web.web import app as flask_app


@pytest.fixture
def client():
    import anagram_web.web as webmod
    eng = Engine()
    eng.use_words(["cat", "act", "cats", "tac", "dog"])
    webmod._engine = eng
    yield flask_app.test_client()
    webmod._engine = None


@pytest.mark.e2e
def test_all_words_json(client):
    rv = client.get("/api/words?q=cats")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["words"] == ["cat", "act", "cats", "tac"]
    for key in ("query", "mode", "words", "elapsed_ms"):
        assert key in data


@pytest.mark.e2e
def test_longest_and_length_modes(client):
    assert client.get("/api/words?q=cats&mode=longest").get_json()["words"] == ["cats"]
    data = client.get("/api/words?q=god&mode=length&n=3").get_json()
    assert data["words"] == ["dog"] and data["length"] == 3


@pytest.mark.e2e
def test_empty_query_and_bad_requests(client):
    assert client.get("/api/words?q=").get_json()["words"] == []
    assert client.get("/api/words?q=cats&mode=bogus").status_code == 400
    assert client.get("/api/words?q=cats&mode=length").status_code == 400


@pytest.mark.e2e
def test_unloaded_dictionary_is_conflict():
    import anagram_web.web as webmod
    webmod._engine = Engine()
    try:
        rv = flask_app.test_client().get("/api/words?q=cats")
        assert rv.status_code == 409
        assert "error" in rv.get_json()
    finally:
        webmod._engine = None
