import pytest

from strongpass.charsets import SYMBOLS
from spweb.api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_home(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "running" in r.get_json()["message"]


def test_generate_defaults(client):
    r = client.post("/generate", json={})
    assert r.status_code == 200
    data = r.get_json()
    assert len(data["password"]) == 14
    assert set(data["strength"]) == {"score", "label", "color"}
    assert r.headers["Cache-Control"] == "no-store"


def test_generate_options(client):
    r = client.post("/generate", json={"length": 20, "symbols": False, "uppercase": False})
    assert r.status_code == 200
    pw = r.get_json()["password"]
    assert len(pw) == 20
    assert not any(c in SYMBOLS or c.isupper() for c in pw)


def test_generate_invalid_length(client):
    r = client.post("/generate", json={"length": 3})
    assert r.status_code == 400
    assert "length" in r.get_json()["error"]
    r = client.post("/generate", json={"length": "twelve"})
    assert r.status_code == 400


def test_generate_no_classes(client):
    body = {"uppercase": False, "lowercase": False, "digits": False, "symbols": False}
    r = client.post("/generate", json=body)
    assert r.status_code == 400


def test_generate_non_object_body(client):
    r = client.post("/generate", json=[1, 2])
    assert r.status_code == 400


def test_score(client):
    r = client.post("/score", json={"password": "abcdefghijklmnop"})
    assert r.status_code == 200
    assert r.get_json()["score"] == 55
    assert r.get_json()["label"] == "Medium"


def test_score_empty(client):
    r = client.post("/score", json={})
    assert r.get_json() == {"score": 0, "label": "None", "color": "#9ca3af"}


def test_score_rejects_non_string(client):
    r = client.post("/score", json={"password": 1234})
    assert r.status_code == 400


def test_generate_rejects_string_flags(client):
    for _ in range(5):
        r = client.post("/generate", json={"symbols": "false", "length": 32})
        assert r.status_code == 400
        assert "symbols" in r.get_json()["error"]
    r = client.post("/generate", json={"digits": 0})
    assert r.status_code == 400
