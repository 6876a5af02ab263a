# tests/test_store.py
from concurrent.futures import ThreadPoolExecutor

from product_api.database import ProductStore
from product_api.models import Product


def _product(pid: str, category: str = "misc") -> Product:
    return Product(id=pid, name=f"P{pid}", description="", price=1, category=category, inStock=True)


def test_seeded_with_three_products():
    store = ProductStore()
    assert [p.id for p in store.snapshot()] == ["1", "2", "3"]
    assert store.count_by_category() == {"electronics": 2, "kitchen": 1}


def test_unseeded_store_is_empty():
    store = ProductStore(seed=False)
    assert len(store) == 0
    assert store.count_by_category() == {}


def test_snapshot_is_a_copy():
    store = ProductStore()
    snap = store.snapshot()
    snap.clear()
    assert len(store) == 3


def test_replace_and_remove_missing_ids():
    store = ProductStore()
    assert store.replace("nope", _product("nope")) is None
    assert store.remove("nope") is None
    assert len(store) == 3


def test_replace_keeps_position():
    store = ProductStore()
    store.replace("2", _product("2", "toys"))
    assert [p.id for p in store.snapshot()] == ["1", "2", "3"]
    assert store.get("2").category == "toys"


def test_concurrent_adds_and_removes():
    store = ProductStore(seed=False)
    ids = [str(i) for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda pid: store.add(_product(pid)), ids))
    assert len(store) == 200

    with ThreadPoolExecutor(max_workers=8) as pool:
        removed = list(pool.map(store.remove, ids[:100]))
    assert all(p is not None for p in removed)
    assert sorted(p.id for p in store.snapshot()) == sorted(ids[100:])
