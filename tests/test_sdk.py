# tests/test_sdk.py
import pytest
from fastapi.testclient import TestClient

from sdk.pycatalog import CatalogAPIError, CatalogClient

from conftest import API_KEY


@pytest.fixture
def sdk(app):
    return CatalogClient(base_url="http://testserver", api_key=API_KEY, session=TestClient(app))


def test_greeting(sdk):
    assert sdk.greeting() == "Hello World!"


def test_list_with_filters(sdk):
    page = sdk.list_products(category="electronics", limit=1, page=2)
    assert [p["name"] for p in page["products"]] == ["Smartphone"]
    assert page["pagination"]["hasPrev"] is True


def test_crud_round_trip(sdk, store):
    created = sdk.create_product("Mug", "Ceramic mug", 8, "kitchen", True)
    assert sdk.get_product(created["id"]) == created

    updated = sdk.update_product(created["id"], "Mug", "Ceramic mug, 350ml", 9.5, "kitchen", False)
    assert updated["inStock"] is False

    removed = sdk.delete_product(created["id"])
    assert removed == updated
    assert len(store) == 3


def test_errors_surface_message_and_details(sdk):
    with pytest.raises(CatalogAPIError) as e:
        sdk.create_product("", "desc", -1, "kitchen", True)
    assert e.value.status_code == 400
    assert e.value.message == "Validation failed"
    assert len(e.value.details) == 2

    with pytest.raises(CatalogAPIError) as e:
        sdk.get_product("missing")
    assert e.value.status_code == 404


def test_missing_key_is_401(app):
    anonymous = CatalogClient(base_url="http://testserver", session=TestClient(app))
    with pytest.raises(CatalogAPIError) as e:
        anonymous.delete_product("1")
    assert e.value.status_code == 401
