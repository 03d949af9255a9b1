"""In-memory inventory storage.

Routes only talk to ``InventoryRepository``; ``InMemoryInventoryStore`` is the
one implementation. Records live for the lifetime of the process.
"""
import logging
from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, List, Optional

from inventory_service.errors import ItemNotFound, ValidationError
from inventory_service.models import InventoryItem, ItemPatch, _generate_id

logger = logging.getLogger(__name__)


class InventoryRepository(ABC):

    @abstractmethod
    def create(
        self, name: str, description: str = "", photo_filename: Optional[str] = None
    ) -> InventoryItem:
        """Add a new item and return it."""

    @abstractmethod
    def list(self) -> List[InventoryItem]:
        """Return every item in insertion order."""

    @abstractmethod
    def get(self, item_id: str) -> InventoryItem:
        """Return the item or raise ItemNotFound."""

    @abstractmethod
    def update(self, item_id: str, patch: ItemPatch) -> InventoryItem:
        """Apply the non-empty fields of ``patch``."""

    @abstractmethod
    def replace_photo(self, item_id: str, photo_filename: str) -> Optional[str]:
        """Point the item at a new photo and return the previous filename."""

    @abstractmethod
    def delete(self, item_id: str) -> InventoryItem:
        """Remove the item and return the removed record."""


class InMemoryInventoryStore(InventoryRepository):
    """Dict-backed store; dicts keep insertion order, which listing relies on."""

    def __init__(self) -> None:
        self._items: Dict[str, InventoryItem] = {}
        self._lock = Lock()

    def create(self, name, description="", photo_filename=None):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Bad Request: inventory_name is required")

        with self._lock:
            item_id = _generate_id()
            while item_id in self._items:
                item_id = _generate_id()
            item = InventoryItem(
                id=item_id,
                name=name,
                description=description or "",
                photo_filename=photo_filename,
            )
            self._items[item_id] = item

        logger.info("Registered item %s (%s)", item.id, item.name)
        return item

    def list(self):
        with self._lock:
            return list(self._items.values())

    def get(self, item_id):
        with self._lock:
            item = self._items.get(item_id)
        if item is None:
            raise ItemNotFound()
        return item

    def update(self, item_id, patch):
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                raise ItemNotFound()
            if patch.name and patch.name.strip():
                item.name = patch.name
            if patch.description:
                item.description = patch.description

        logger.info("Updated item %s", item_id)
        return item

    def replace_photo(self, item_id, photo_filename):
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                raise ItemNotFound()
            previous = item.photo_filename
            item.photo_filename = photo_filename

        logger.info("Item %s photo %s -> %s", item_id, previous, photo_filename)
        return previous

    def delete(self, item_id):
        with self._lock:
            item = self._items.pop(item_id, None)
        if item is None:
            raise ItemNotFound()

        logger.info("Deleted item %s", item_id)
        return item

    def __len__(self) -> int:
        return len(self._items)
