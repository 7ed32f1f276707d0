"""
Shared fixtures for the gateway tests.

Backends are faked at the HTTP level: ``FakeBackends.handle`` is plugged into
``httpx.MockTransport``, so every test runs through the real channels,
clients, gate, handlers and aggregation.
"""

import itertools
import json
import re

import httpx
import pytest
from fastapi.testclient import TestClient

from ecommerce_gateway.api.app import create_app
from ecommerce_gateway.clients import BackendClients
from ecommerce_gateway.config import Settings

ADMIN = {"Authorization": "Bearer admin-token"}
USER = {"Authorization": "user-token"}
GUEST = {"Authorization": "Bearer guest-token"}

CRUD_METHOD = re.compile(r"^(Create|Get|Update|Delete)(Category|Product|Order|User)(ById|ByID|List)?$")

RESOURCES = {
    "Category": ("categories", "c"),
    "Product": ("products", "p"),
    "Order": ("orders", "o"),
    "User": ("users", "u"),
}


def camel_keys(value):
    """Rename dict keys to proto3 JSON names (category_title -> categoryTitle)."""
    if isinstance(value, dict):
        return {
            re.sub(r"_([a-z0-9])", lambda m: m.group(1).upper(), key): camel_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [camel_keys(item) for item in value]
    return value


def snake_keys(value):
    """Rename dict keys to proto field names (categoryTitle -> category_title)."""
    if isinstance(value, dict):
        return {
            re.sub(r"([A-Z])", lambda m: "_" + m.group(1).lower(), key): snake_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [snake_keys(item) for item in value]
    return value


def error(status_code: int, code: str, message: str) -> httpx.Response:
    """Build a Connect error response."""
    return httpx.Response(status_code, json={"code": code, "message": message})


class FakeBackends:
    """In-memory stand-in for the four backends, recording every call."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.requests: dict[str, dict] = {}
        self.wire: dict[str, dict] = {}
        self.snake_case_responses = False
        self.unreachable: set[str] = set()
        self._ids = itertools.count(100)

        self.tokens = {
            "admin-token": {"id": "u1", "username": "admin", "user_type": "admin"},
            "user-token": {"id": "u2", "username": "alice", "user_type": "user"},
            "guest-token": {"id": "u3", "username": "bob", "user_type": "guest"},
        }
        self.store: dict[str, dict[str, dict]] = {
            "categories": {"c1": {"id": "c1", "category_title": "Stationery"}},
            "products": {
                "p1": {
                    "id": "p1",
                    "category_id": "c1",
                    "title": "Pen",
                    "descrip": "blue pen",
                    "price": 1.5,
                },
            },
            "orders": {
                "o1": {
                    "id": "o1",
                    "product": {"id": "p1"},
                    "quantity": 2,
                    "user_name": "Alice",
                    "user_address": "1 Main St",
                    "user_phone": "555-0100",
                },
            },
            "users": {"u1": {"id": "u1", "username": "admin", "user_type": "admin"}},
        }

    def reply(self, message: dict) -> httpx.Response:
        """Answer with proto3 JSON names, or proto field names when asked to."""
        if self.snake_case_responses:
            return httpx.Response(200, json=message)
        return httpx.Response(200, json=camel_keys(message))

    def called(self, service: str, method: str) -> bool:
        return f"{service}/{method}" in self.calls

    def handle(self, request: httpx.Request) -> httpx.Response:
        qualified_service, method = request.url.path.strip("/").split("/")
        service = qualified_service.split(".")[-1]
        self.calls.append(f"{service}/{method}")

        if service in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)

        self.wire[method] = json.loads(request.content or b"{}")
        body = snake_keys(self.wire[method])
        self.requests[method] = body

        if method == "HasAccess":
            user = self.tokens.get(body.get("token", ""))
            if user is None:
                return self.reply({})
            return self.reply({"has_access": True, "user": user})

        if method == "Login":
            if body == {"username": "admin", "password": "secret"}:
                return self.reply({"token": "admin-token"})
            return error(401, "unauthenticated", "invalid username or password")

        match = CRUD_METHOD.match(method)
        if match is None:
            return error(404, "unimplemented", f"unknown method {method}")
        action, resource, suffix = match.groups()
        records = self.store[RESOURCES[resource][0]]

        if action == "Create":
            return self._create(resource, records, body)
        if action == "Get" and suffix == "List":
            return self._list(resource, records, body)
        if action == "Get":
            if body.get("id") not in records:
                return error(404, "not_found", f"{resource.lower()} not found")
            return self.reply(records[body["id"]])
        if action == "Update":
            return self._update(resource, records, body)
        if body.get("id") not in records:
            return error(404, "not_found", f"{resource.lower()} not found")
        return self.reply(records.pop(body["id"]))

    def _create(self, resource: str, records: dict, body: dict) -> httpx.Response:
        if resource == "Product" and body.get("category_id") not in self.store["categories"]:
            return error(400, "invalid_argument", "category does not exist")

        record_id = f"{RESOURCES[resource][1]}{next(self._ids)}"
        record = {"id": record_id, **body}
        if resource == "Order":
            record["product"] = {"id": record.pop("product_id")}
        if resource == "User":
            record.pop("password", None)
        records[record_id] = record
        return self.reply(record)

    def _list(self, resource: str, records: dict, body: dict) -> httpx.Response:
        offset, limit = body.get("offset", 0), body.get("limit", 10)
        items = list(records.values())[offset : offset + limit]
        return self.reply({RESOURCES[resource][0]: items, "count": len(records)})

    def _update(self, resource: str, records: dict, body: dict) -> httpx.Response:
        if body.get("id") not in records:
            return error(404, "not_found", f"{resource.lower()} not found")
        changes = {key: value for key, value in body.items() if key not in ("id", "password")}
        if any(value == "" for value in changes.values()):
            return error(400, "invalid_argument", "fields must not be empty")
        records[body["id"]].update(changes)
        return self.reply(records[body["id"]])


@pytest.fixture
def backends():
    """Create fresh fake backends."""
    return FakeBackends()


@pytest.fixture
def client(backends):
    """Create a test client wired to the fake backends."""
    transport = httpx.MockTransport(backends.handle)

    async def connect(settings: Settings) -> BackendClients:
        return await BackendClients.connect(settings, transport=transport)

    app = create_app(settings=Settings(), connect=connect)
    with TestClient(app) as test_client:
        yield test_client


def assert_envelope(response: httpx.Response) -> dict:
    """Check the body holds exactly one of data or error, and return it."""
    body = response.json()
    assert ("data" in body) != ("error" in body), body
    if "data" in body:
        assert body["message"] == "OK"
    return body
