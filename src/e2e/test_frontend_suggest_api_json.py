from pathlib import Path
import pytest
from spellrank.engine import Engine
from spellrank.DB.storage import build_resources
from textservice.web import app as flask_app

def _seed(tmp: Path) -> str:
    root = tmp / "resources"; root.mkdir()
    build_resources({"hello": 90, "help": 30, "world": 100}, str(root / "en.words"), str(root / "en.freq"))
    return str(root)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine(resource_root=_seed(tmp_path))
    import textservice.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)
    monkeypatch.setattr(webmod, "_session", eng.create_session("en"))
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_suggest_api_returns_ranked_strings(client):
    rv = client.get("/api/suggest?q=helo&k=2")
    assert rv.status_code == 200
    data = rv.get_json()
    assert isinstance(data, list) and 0 < len(data) <= 2
    assert all(isinstance(s, str) for s in data)
    assert set(data) <= {"hello", "help", "world"}

@pytest.mark.e2e
def test_suggest_api_empty_query(client):
    rv = client.get("/api/suggest?q=")
    assert rv.status_code == 200
    assert rv.get_json() == []

@pytest.mark.e2e
def test_parameter_channel_over_http(client):
    before = client.get("/api/parameters").get_json()
    assert len(before) == 5

    rv = client.post("/api/parameters", json={"parameters": [0.65, 0.35, 1.0, 1.0, 1.0]})
    assert rv.get_json() == {"result": "valid"}
    assert client.get("/api/parameters").get_json() == [0.65, 0.35, 1.0, 1.0, 1.0]

    rv = client.post("/api/parameters", json=[1.0, 2.0])
    assert rv.get_json() == {"result": "invalid"}
    rv = client.post("/api/parameters", data="not json")
    assert rv.get_json() == {"result": "invalid"}
    assert client.get("/api/parameters").get_json() == [0.65, 0.35, 1.0, 1.0, 1.0]

@pytest.mark.e2e
def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "locale": "en"}

@pytest.mark.e2e
def test_parameter_message_is_acknowledged_without_worker(client):
    import textservice.web as webmod
    acks = webmod._engine.parameters.acknowledgments
    rv = client.post("/api/parameters/messages", json=[0.5, 0.5, 1.0, 1.0, 1.0])
    assert rv.status_code == 202
    assert acks.get_nowait() == "valid"
    assert client.get("/api/parameters").get_json() == [0.5, 0.5, 1.0, 1.0, 1.0]

    client.post("/api/parameters/messages", json={"parameters": None})
    assert acks.get_nowait() == "invalid"

@pytest.mark.e2e
def test_parameter_message_goes_through_running_worker(client):
    import textservice.web as webmod
    channel = webmod._engine.parameters
    channel.start()
    rv = client.post("/api/parameters/messages", json={"parameters": [0.7, 0.3, 1.0, 1.0, 1.0]})
    assert rv.status_code == 202
    assert channel.acknowledgments.get(timeout=2) == "valid"
    assert channel.weights.as_list() == [0.7, 0.3, 1.0, 1.0, 1.0]

@pytest.mark.e2e
def test_main_starts_parameter_worker(tmp_path: Path, monkeypatch):
    import textservice.web as webmod
    monkeypatch.setattr(webmod, "_engine", None)
    monkeypatch.setattr(webmod, "_session", None)
    seen = []
    monkeypatch.setattr(webmod.app, "run", lambda **kw: seen.append(webmod._engine.parameters.running))
    assert webmod.main(["--resources", _seed(tmp_path)]) == 0
    assert seen == [True]
    assert not webmod._engine.parameters.running
