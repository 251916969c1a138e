from fastapi.testclient import TestClient

from spotbnb.main import create_app


def test_unknown_route(client):
    r = client.get("/api/nowhere")
    assert r.status_code == 404
    body = r.json()
    assert body["title"] == "Resource Not Found"
    assert body["message"] == "The requested resource couldn't be found."


def test_development_errors_include_stack(client, make_user, make_spot, auth_headers):
    owner, other = make_user(), make_user()
    spot = make_spot(owner)
    body = client.delete(f"/api/spots/{spot.id}", headers=auth_headers(other)).json()
    assert body["title"] == "Forbidden"
    assert "ForbiddenError" in body["stack"]


def test_production_errors_hide_detail(settings):
    app = create_app(settings.model_copy(update={"environment": "production"}))
    with TestClient(app) as client:
        r = client.get("/api/spots/999")
        assert r.status_code == 404
        assert r.json() == {"message": "Spot couldn't be found"}

        r = client.post("/api/spots", json={})
        assert r.status_code == 401
        assert set(r.json()) == {"message"}
    app.state.engine.dispose()


def test_unexpected_error_is_500(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.get("/boom")
    assert r.status_code == 500
    body = r.json()
    assert body["message"] == "Internal Server Error"
    assert "RuntimeError" in body["stack"]


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_production_500_hides_stack(settings):
    app = create_app(settings.model_copy(update={"environment": "production"}))

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.get("/boom")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error"}
    app.state.engine.dispose()
