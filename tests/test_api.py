"""
Tests for the gateway application shell.
"""

import pytest
from fastapi.testclient import TestClient

from ecommerce_gateway.api.app import create_app, format_validation_error
from ecommerce_gateway.config import Settings
from ecommerce_gateway.errors import BackendConnectionError

from conftest import ADMIN, assert_envelope


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "E-commerce API Gateway"
    assert data["endpoints"]["category"] == "/v1/category"


def test_health(client, backends):
    """Health does not probe the backends."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert backends.calls == []


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/v1/nothing-here", headers=ADMIN)
    assert response.status_code == 404
    assert assert_envelope(response) == {"error": "Not Found"}


def test_custom_prefix(backends):
    """Routes are mounted under the configured prefix."""
    import httpx

    from ecommerce_gateway.clients import BackendClients

    transport = httpx.MockTransport(backends.handle)

    async def connect(settings):
        return await BackendClients.connect(settings, transport=transport)

    app = create_app(settings=Settings(api_prefix="/api"), connect=connect)
    with TestClient(app) as client:
        assert client.get("/api/category/c1", headers=ADMIN).status_code == 200
        assert client.get("/v1/category/c1", headers=ADMIN).status_code == 404


def test_startup_fails_without_backends():
    """A client set that cannot be built stops the application from starting."""

    async def connect(settings):
        raise BackendConnectionError("Failed to open order backend channel")

    app = create_app(settings=Settings(), connect=connect)
    with pytest.raises(BackendConnectionError):
        with TestClient(app):
            pass


def test_channels_closed_on_shutdown(backends):
    import httpx

    from ecommerce_gateway.clients import BackendClients

    transport = httpx.MockTransport(backends.handle)
    built = []

    async def connect(settings):
        clients = await BackendClients.connect(settings, transport=transport)
        built.append(clients)
        return clients

    with TestClient(create_app(settings=Settings(), connect=connect)):
        assert not any(channel.is_closed for channel in built[0].channels)

    assert all(channel.is_closed for channel in built[0].channels)


def test_binding_failure_is_rendered_as_binding_error(client, backends):
    from ecommerce_gateway.errors import BindingError

    response = client.post("/v1/product", json={"title": "Pencil"}, headers=ADMIN)
    assert response.status_code == BindingError.http_status == 400
    error = assert_envelope(response)["error"]
    assert "category_id: Field required" in error
    assert "price: Field required" in error
    assert not backends.called("ProductService", "CreateProduct")


def test_format_validation_error():
    from fastapi.exceptions import RequestValidationError

    exc = RequestValidationError(
        [
            {"loc": ("query", "limit"), "msg": "Input should be a valid integer"},
            {"loc": ("body", "price"), "msg": "Field required"},
        ]
    )
    assert format_validation_error(exc) == (
        "limit: Input should be a valid integer; price: Field required"
    )
