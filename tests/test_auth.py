# tests/test_auth.py
import pytest

from catalog.config import Settings
from catalog.main import create_app
from fastapi.testclient import TestClient

from conftest import AUTH, product_body

UNAUTHORIZED = {"error": "Unauthorized: Invalid or missing X-API-Key header"}


@pytest.mark.parametrize("headers", [{}, {"X-API-Key": "wrong"}, {"X-API-Key": ""}])
def test_create_requires_key(client, store, headers):
    r = client.post("/api/products", json=product_body(), headers=headers)
    assert r.status_code == 401
    assert r.json() == UNAUTHORIZED
    assert len(store) == 3


def test_update_requires_key(client, store):
    r = client.put("/api/products/1", json=product_body(name="Hacked"))
    assert r.status_code == 401
    assert store.find_by_id("1").name == "Laptop"


def test_delete_requires_key(client, store):
    r = client.delete("/api/products/1", headers={"X-API-Key": "wrong"})
    assert r.status_code == 401
    assert len(store) == 3


def test_auth_runs_before_validation(client):
    r = client.post("/api/products", json={})
    assert r.status_code == 401


def test_auth_runs_before_lookup(client):
    r = client.delete("/api/products/does-not-exist")
    assert r.status_code == 401


def test_reads_are_public(client):
    assert client.get("/api/products").status_code == 200
    assert client.get("/api/products/1").status_code == 200


def test_key_comparison_is_exact(client):
    r = client.delete("/api/products/1", headers={"X-API-Key": AUTH["X-API-Key"].upper()})
    assert r.status_code == 401


def test_header_name_is_configurable():
    app = create_app(settings=Settings(api_key="s3cret", api_key_header="X-Catalog-Token"))
    client = TestClient(app)
    assert client.delete("/api/products/1", headers={"X-API-Key": "s3cret"}).status_code == 401
    r = client.delete("/api/products/1", headers={"X-Catalog-Token": "s3cret"})
    assert r.status_code == 200
    assert r.json()["id"] == "1"
