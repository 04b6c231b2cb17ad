"""
Tests for the in-memory product store
"""

import threading

import pytest

from product_catalog.seed_data import SEED_PRODUCTS
from product_catalog.store import ProductRecord, ProductStore


def _assert_qty_invariant(store: ProductStore) -> None:
    assert store.total_quantity() == sum(p.qty or 0 for p in store.list())


@pytest.mark.unit
class TestReads:
    def test_list_returns_seed_products_in_order(self, store):
        products = store.list()

        assert [p.id for p in products] == ["1", "2", "3", "4", "5"]
        assert products[0] == ProductRecord(id="1", product_name="Apple", price=3.99, qty=2)

    def test_list_returns_a_copy(self, store):
        products = store.list()
        products.clear()

        assert len(store) == len(SEED_PRODUCTS)

    def test_get_by_id(self, store):
        product = store.get_by_id("4")

        assert product is not None
        assert product.product_name == "Mango"

    def test_get_by_id_missing_returns_none(self, store):
        assert store.get_by_id("does-not-exist") is None
        assert store.get_by_id(None) is None

    def test_total_price(self, store):
        assert store.total_price("2") == pytest.approx(5.97)
        assert store.total_price("4") == pytest.approx(27.5)

    def test_total_price_missing_product_returns_none(self, store):
        assert store.total_price("nope") is None

    def test_total_price_with_missing_qty_returns_none(self, empty_store):
        product = empty_store.add(product_name="Loose", price=2.5)

        assert empty_store.total_price(product.id) is None

    def test_total_quantity_of_seed_store(self, store):
        assert store.total_quantity() == 16

    def test_total_quantity_of_empty_store(self, empty_store):
        assert empty_store.total_quantity() == 0

    def test_total_quantity_treats_missing_qty_as_zero(self, empty_store):
        empty_store.add(product_name="A", price=1.0, qty=3)
        empty_store.add(product_name="B", price=1.0)

        assert empty_store.total_quantity() == 3


@pytest.mark.unit
class TestAdd:
    def test_add_appends_product(self, store):
        before = len(store)

        product = store.add(product_name="Kiwi", price=1.5, qty=10)

        assert len(store) == before + 1
        assert store.list()[-1] == product
        assert store.get_by_id(product.id) == product
        assert product.product_name == "Kiwi"
        assert product.price == 1.5
        assert product.qty == 10
        _assert_qty_invariant(store)

    def test_add_generates_unique_ids(self, store):
        added = [store.add(product_name=f"P{i}", price=1.0, qty=1) for i in range(50)]
        ids = [p.id for p in store.list()]

        assert all(p.id for p in added)
        assert len(ids) == len(set(ids))

    def test_add_with_no_fields(self, empty_store):
        product = empty_store.add()

        assert product.id
        assert product.product_name is None
        assert product.price is None
        assert product.qty is None


@pytest.mark.unit
class TestUpdate:
    def test_update_replaces_record(self, store):
        updated = store.update("3", product_name="Blood Orange", price=2.5, qty=7)

        assert updated == ProductRecord(id="3", product_name="Blood Orange", price=2.5, qty=7)
        assert store.get_by_id("3") == updated
        assert [p.id for p in store.list()] == ["1", "2", "3", "4", "5"]
        _assert_qty_invariant(store)

    def test_update_does_not_merge_omitted_fields(self, store):
        updated = store.update("1", product_name="Green Apple")

        assert updated is not None
        assert updated.price is None
        assert updated.qty is None
        assert store.get_by_id("1") == ProductRecord(id="1", product_name="Green Apple")

    def test_update_missing_product_leaves_store_unchanged(self, store):
        before = store.list()

        assert store.update("missing", product_name="Ghost", price=1.0, qty=1) is None
        assert store.update(None, product_name="Ghost") is None
        assert store.list() == before

    def test_previously_returned_record_is_not_mutated(self, store):
        original = store.get_by_id("2")
        store.update("2", product_name="Plantain", price=0.99, qty=1)

        assert original.product_name == "Banana"


@pytest.mark.unit
class TestDelete:
    def test_delete_removes_and_returns_product(self, store):
        before = len(store)

        deleted = store.delete("1")

        assert deleted is not None
        assert deleted.product_name == "Apple"
        assert len(store) == before - 1
        assert store.get_by_id("1") is None
        _assert_qty_invariant(store)

    def test_delete_missing_product_leaves_store_unchanged(self, store):
        before = store.list()

        assert store.delete("missing") is None
        assert store.delete(None) is None
        assert store.list() == before


@pytest.mark.unit
def test_seed_stores_are_independent():
    from product_catalog.seed_data import create_store

    first = create_store(seed=True)
    second = create_store(seed=True)
    first.delete("1")

    assert second.get_by_id("1") is not None


@pytest.mark.unit
def test_concurrent_adds_are_not_lost(empty_store):
    def worker():
        for _ in range(100):
            empty_store.add(product_name="x", price=1.0, qty=1)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(empty_store) == 800
    assert empty_store.total_quantity() == 800


@pytest.mark.unit
def test_total_price_overflow_returns_none(empty_store):
    product = empty_store.add(product_name="Gold", price=1e308, qty=10)

    assert product.total_price is None
    assert empty_store.total_price(product.id) is None
