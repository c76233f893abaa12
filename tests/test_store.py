# tests/test_store.py
import pytest

from catalog.database import ProductStore, seed_products
from catalog.models import Product


def _product(pid, name="Thing"):
    return Product(id=pid, name=name, description="d", price=1, category="c", in_stock=True)


def test_seed_store_keeps_insertion_order():
    s = ProductStore(seed_products())
    assert [p.id for p in s.list()] == ["1", "2", "3"]
    assert len(s) == 3


def test_list_is_a_copy():
    s = ProductStore(seed_products())
    items = s.list()
    items.clear()
    assert len(s) == 3


def test_find_and_index():
    s = ProductStore(seed_products())
    assert s.find_by_id("2").name == "Smartphone"
    assert s.find_by_id("nope") is None
    assert s.index_of("3") == 2
    assert s.index_of("nope") is None


def test_insert_rejects_duplicate_id():
    s = ProductStore(seed_products())
    with pytest.raises(ValueError):
        s.insert(_product("1"))
    assert len(s) == 3


def test_replace_keeps_position():
    s = ProductStore(seed_products())
    s.replace_at(0, _product("1", name="Gaming Laptop"))
    assert s.list()[0].name == "Gaming Laptop"
    assert [p.id for p in s.list()] == ["1", "2", "3"]


def test_replace_cannot_change_id():
    s = ProductStore(seed_products())
    with pytest.raises(ValueError):
        s.replace_at(0, _product("99"))


def test_remove_returns_removed():
    s = ProductStore(seed_products())
    removed = s.remove_at(1)
    assert removed.id == "2"
    assert [p.id for p in s.list()] == ["1", "3"]


def test_seed_products_are_fresh_copies():
    a = seed_products()
    b = seed_products()
    assert a[0] == b[0]
    assert a[0] is not b[0]
