"""Tests for the in-memory inventory store."""
import threading

import pytest

from inventory_service.errors import ItemNotFound, ValidationError
from inventory_service.models import ItemPatch
from inventory_service.store import InMemoryInventoryStore, InventoryRepository


@pytest.fixture
def store():
    return InMemoryInventoryStore()


class TestCreate:

    def test_create_assigns_id_and_defaults(self, store):
        item = store.create("Drill")
        assert item.id
        assert item.name == "Drill"
        assert item.description == ""
        assert item.photo_filename is None
        assert isinstance(store, InventoryRepository)

    @pytest.mark.parametrize("name", ["", "   ", None, 123])
    def test_empty_name_rejected(self, store, name):
        with pytest.raises(ValidationError):
            store.create(name)
        assert len(store) == 0

    def test_back_to_back_ids_differ(self, store):
        first = store.create("A")
        second = store.create("B")
        assert first.id != second.id

    def test_concurrent_creates_get_unique_ids(self, store):
        """Creating from many threads never loses or duplicates an item."""
        def worker():
            for i in range(50):
                store.create(f"item {i}")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [item.id for item in store.list()]
        assert len(ids) == 400
        assert len(set(ids)) == 400


class TestReadAndList:

    def test_list_keeps_insertion_order(self, store):
        names = ["Hammer", "Saw", "Wrench"]
        for name in names:
            store.create(name)
        assert [item.name for item in store.list()] == names

    def test_get_unknown_raises(self, store):
        with pytest.raises(ItemNotFound):
            store.get("missing")


class TestUpdate:

    def test_update_overwrites_present_fields(self, store):
        item = store.create("Drill", "cordless")
        store.update(item.id, ItemPatch(name="Impact drill"))
        assert store.get(item.id).name == "Impact drill"
        assert store.get(item.id).description == "cordless"

    def test_empty_string_means_no_change(self, store):
        item = store.create("Drill", "cordless")
        store.update(item.id, ItemPatch(name="", description=""))
        stored = store.get(item.id)
        assert stored.name == "Drill"
        assert stored.description == "cordless"

    def test_patch_from_fields_drops_empty_values(self):
        patch = ItemPatch.from_fields({"name": "", "description": "new"})
        assert patch.name is None
        assert patch.description == "new"

    def test_blank_name_means_no_change(self, store):
        item = store.create("Drill")
        store.update(item.id, ItemPatch(name="   "))
        assert store.get(item.id).name == "Drill"
        assert ItemPatch.from_fields({"name": "  \t"}).name is None

    @pytest.mark.parametrize("fields", [{"name": 123}, {"description": ["x"]}, {"name": True}])
    def test_patch_from_fields_rejects_non_strings(self, fields):
        with pytest.raises(ValidationError):
            ItemPatch.from_fields(fields)

    def test_update_unknown_raises(self, store):
        with pytest.raises(ItemNotFound):
            store.update("missing", ItemPatch(name="x"))


class TestPhotoAndDelete:

    def test_replace_photo_returns_previous(self, store):
        item = store.create("Drill", photo_filename="photo-1.jpg")
        previous = store.replace_photo(item.id, "photo-2.jpg")
        assert previous == "photo-1.jpg"
        assert store.get(item.id).photo_filename == "photo-2.jpg"

    def test_replace_photo_unknown_raises(self, store):
        with pytest.raises(ItemNotFound):
            store.replace_photo("missing", "photo.jpg")

    def test_delete_removes_record(self, store):
        item = store.create("Drill", photo_filename="photo-1.jpg")
        removed = store.delete(item.id)
        assert removed.photo_filename == "photo-1.jpg"
        assert store.list() == []
        with pytest.raises(ItemNotFound):
            store.delete(item.id)
