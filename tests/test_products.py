"""
Tests for the product routes.
"""

from conftest import ADMIN, USER, assert_envelope


def test_create_product(client, backends):
    """Creating a product returns 201 with the backend-generated id."""
    payload = {"category_id": "c1", "title": "Pencil", "descrip": "HB", "price": 0.5}
    response = client.post("/v1/product", json=payload, headers=ADMIN)
    assert response.status_code == 201

    data = assert_envelope(response)["data"]
    assert data["id"]
    assert data["title"] == "Pencil"
    assert data["price"] == 0.5
    assert backends.requests["CreateProduct"] == payload
    assert backends.wire["CreateProduct"] == {
        "categoryId": "c1",
        "title": "Pencil",
        "descrip": "HB",
        "price": 0.5,
    }


def test_create_product_unknown_category(client):
    payload = {"category_id": "nope", "title": "Pencil", "price": 0.5}
    response = client.post("/v1/product", json=payload, headers=ADMIN)
    assert response.status_code == 400
    assert assert_envelope(response) == {"error": "category does not exist"}


def test_create_product_bad_price(client, backends):
    payload = {"category_id": "c1", "title": "Pencil", "price": "cheap"}
    response = client.post("/v1/product", json=payload, headers=ADMIN)
    assert response.status_code == 400
    assert "price" in response.json()["error"]
    assert not backends.called("ProductService", "CreateProduct")


def test_create_product_requires_admin(client, backends):
    payload = {"category_id": "c1", "title": "Pencil", "price": 0.5}
    response = client.post("/v1/product", json=payload, headers=USER)
    assert response.status_code == 401
    assert response.json() == {"error": "Permission Denied"}
    assert not backends.called("ProductService", "CreateProduct")


def test_get_product(client):
    response = client.get("/v1/product/p1", headers=USER)
    assert response.status_code == 200
    data = assert_envelope(response)["data"]
    assert data == {
        "id": "p1",
        "category_id": "c1",
        "title": "Pen",
        "descrip": "blue pen",
        "price": 1.5,
        "created_at": None,
        "updated_at": None,
    }


def test_get_missing_product(client):
    response = client.get("/v1/product/nope", headers=USER)
    assert response.status_code == 404
    assert response.json() == {"error": "product not found"}


def test_get_product_backend_down(client, backends):
    backends.unreachable.add("ProductService")
    response = client.get("/v1/product/p1", headers=USER)
    assert response.status_code == 500


def test_list_products_passes_through(client, backends):
    response = client.get("/v1/product?limit=1", headers=USER)
    assert response.status_code == 200
    assert assert_envelope(response)["data"] == {
        "products": [backends.store["products"]["p1"]],
        "count": 1,
    }


def test_list_products_non_integer_offset(client, backends):
    response = client.get("/v1/product?offset=x", headers=USER)
    assert response.status_code == 400
    assert not backends.called("ProductService", "GetProductList")


def test_update_product(client, backends):
    response = client.put(
        "/v1/product", json={"id": "p1", "title": "Gel pen", "price": 2.0}, headers=ADMIN
    )
    assert response.status_code == 200
    assert backends.requests["UpdateProduct"] == {"id": "p1", "title": "Gel pen", "price": 2.0}
    assert assert_envelope(response)["data"]["title"] == "Gel pen"


def test_update_missing_product(client):
    response = client.put(
        "/v1/product", json={"id": "nope", "title": "Gel pen", "price": 2.0}, headers=ADMIN
    )
    assert response.status_code == 404


def test_delete_product(client, backends):
    response = client.delete("/v1/product/p1", headers=ADMIN)
    assert response.status_code == 200
    assert assert_envelope(response)["data"]["title"] == "Pen"
    assert "p1" not in backends.store["products"]


def test_delete_missing_product(client):
    response = client.delete("/v1/product/nope", headers=ADMIN)
    assert response.status_code == 400
