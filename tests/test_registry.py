import pytest
from fastapi.testclient import TestClient

from inkmcp.registry import server as registry
from inkmcp.registry.server import app, loaded_catalog
from inkmcp.servers import ink as ink_server


@pytest.fixture
def client(packaged_catalog):
    app.dependency_overrides[loaded_catalog] = lambda: packaged_catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def missing_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("INK_DATA_DIR", str(tmp_path / "absent"))
    ink_server.set_catalog(None)
    yield tmp_path / "absent"
    ink_server.set_catalog(None)


@pytest.fixture
def no_server(monkeypatch):
    import uvicorn

    # keep caplog's handler installed and never start a real server
    monkeypatch.setattr(ink_server, "configure_logging", lambda level: None)
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: pytest.fail("server started"))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["inks"] == 32


def test_list_inks_paginates(client, packaged_catalog):
    first = client.get("/v0/inks", params={"limit": 10}).json()
    assert first["metadata"]["count"] == 10
    cursor = first["metadata"]["next_cursor"]
    assert cursor == packaged_catalog.inks[9].id

    second = client.get("/v0/inks", params={"limit": 10, "cursor": cursor}).json()
    assert second["inks"][0]["id"] == packaged_catalog.inks[10].id

    last = client.get("/v0/inks", params={"limit": 100}).json()
    assert last["metadata"]["count"] == 32
    assert last["metadata"].get("next_cursor") is None


def test_list_inks_unknown_cursor_starts_over(client, packaged_catalog):
    body = client.get("/v0/inks", params={"limit": 3, "cursor": "no-such-ink"}).json()
    assert [ink["id"] for ink in body["inks"]] == [ink.id for ink in packaged_catalog.inks[:3]]


def test_list_inks_final_page_has_no_cursor(client, packaged_catalog):
    cursor = packaged_catalog.inks[27].id
    body = client.get("/v0/inks", params={"limit": 10, "cursor": cursor}).json()
    assert body["metadata"]["count"] == 4
    assert body["metadata"].get("next_cursor") is None


def test_get_ink(client):
    body = client.get("/v0/inks/diamine-oxblood").json()
    assert body["color"] == [110, 20, 30]
    assert body["hex"] == "#6e141e"
    assert body["metadata"]["maker"] == "Diamine"


def test_get_ink_not_found(client):
    assert client.get("/v0/inks/nope").status_code == 404


def test_closest(client):
    body = client.get("/v0/colors/0078be/closest", params={"limit": 2}).json()
    assert body["target_rgb"] == [0, 120, 190]
    assert [r["id"] for r in body["results"]][0] == "iroshizuku-kon-peki"
    assert len(body["results"]) == 2


def test_closest_invalid_color(client):
    assert client.get("/v0/colors/zzz/closest").status_code == 422


def test_health_reports_unavailable_catalog(missing_data_dir):
    response = TestClient(app).get("/health")
    assert response.status_code == 503
    assert response.json()["detail"] == "Ink catalog unavailable"


def test_main_exits_when_catalog_missing(missing_data_dir, no_server, caplog):
    with pytest.raises(SystemExit) as exc_info:
        registry.main()
    assert exc_info.value.code == 1
    assert "Error loading ink data" in caplog.text


def test_main_exits_on_invalid_settings(monkeypatch, no_server, caplog):
    monkeypatch.setenv("PORT", "http")
    with pytest.raises(SystemExit) as exc_info:
        registry.main()
    assert exc_info.value.code == 1
    assert "Invalid PORT: http" in caplog.text
