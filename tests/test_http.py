from fastapi import FastAPI
from fastapi.testclient import TestClient

from okazje.errors import CatalogError, ClientError, register_error_handlers
from okazje.middleware import access_log_middleware


def _app():
    app = FastAPI()
    app.middleware("http")(access_log_middleware)
    register_error_handlers(app)

    @app.get("/ok")
    async def ok():
        return {"status": "ok"}

    @app.get("/bad")
    async def bad():
        raise ClientError("Cannot sort deals by 'link'")

    @app.get("/catalog")
    async def catalog():
        raise CatalogError("catalog.json is not valid JSON")

    return app


def test_request_id_is_echoed():
    client = TestClient(_app())
    response = client.get("/ok", headers={"x-request-id": "req-42"})
    assert response.status_code == 200
    assert response.headers["x-request-id"] == "req-42"


def test_request_id_is_generated_when_missing():
    client = TestClient(_app())
    assert len(client.get("/ok").headers["x-request-id"]) == 12


def test_client_errors_map_to_400():
    response = TestClient(_app()).get("/bad")
    assert response.status_code == 400
    assert response.json() == {"error": "client_error", "details": "Cannot sort deals by 'link'"}


def test_catalog_errors_map_to_500():
    response = TestClient(_app()).get("/catalog")
    assert response.status_code == 500
    assert response.json()["error"] == "catalog_error"
