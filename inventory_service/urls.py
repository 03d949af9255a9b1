"""Externally reachable links to inventory resources."""
from typing import Optional

from inventory_service.models import InventoryItem


def build_photo_url(host: str, port: int, item_id: str) -> str:
    return f"http://{host}:{port}/inventory/{item_id}/photo"


def photo_url_for(item: InventoryItem, host: str, port: int) -> Optional[str]:
    if not item.photo_filename:
        return None
    return build_photo_url(host, port, item.id)
