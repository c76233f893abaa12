# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.database import ProductStore, seed_products
from catalog.main import create_app

API_KEY = "test-key"
AUTH = {"X-API-Key": API_KEY}


def product_body(**overrides):
    body = {
        "name": "Desk Lamp",
        "description": "LED lamp with dimmer",
        "price": 25,
        "category": "home",
        "inStock": True,
    }
    body.update(overrides)
    return body


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY)


@pytest.fixture
def store():
    return ProductStore(seed_products())


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
