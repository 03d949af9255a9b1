from fastapi import Request

from inventory_service.config import Settings
from inventory_service.errors import ValidationError
from inventory_service.photo import PhotoStorage
from inventory_service.store import InventoryRepository


def get_store(request: Request) -> InventoryRepository:
    return request.app.state.store


def get_photos(request: Request) -> PhotoStorage:
    return request.app.state.photos


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_fields(request: Request) -> dict:
    """Body fields from either a JSON object or an urlencoded/multipart form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError("Malformed JSON body")
        return payload if isinstance(payload, dict) else {}
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
