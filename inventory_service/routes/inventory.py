import dataclasses
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import FileResponse, PlainTextResponse

from inventory_service.config import Settings
from inventory_service.dependencies import get_photos, get_settings, get_store, read_fields
from inventory_service.errors import ItemNotFound, UploadError, ValidationError
from inventory_service.models import InventoryItem, ItemOut, ItemPatch, text_field
from inventory_service.photo import PhotoStorage
from inventory_service.store import InventoryRepository
from inventory_service.urls import photo_url_for

router = APIRouter()

NO_PHOTO_MARKER = "(No photo)"


def _to_out(item: InventoryItem, settings: Settings) -> ItemOut:
    return ItemOut(
        id=item.id,
        name=item.name,
        description=item.description,
        photo_url=photo_url_for(item, settings.host, settings.port),
    )


def _is_truthy(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in ("on", "true")


def _has_upload(photo: Optional[UploadFile]) -> bool:
    return bool(photo and photo.filename)


def annotate_description(item: InventoryItem, has_photo: bool, host: str, port: int) -> InventoryItem:
    """Return a copy of ``item`` whose description carries the photo link or a marker.

    The stored record is never touched.
    """
    result = dataclasses.replace(item)
    if has_photo:
        link = photo_url_for(item, host, port) or NO_PHOTO_MARKER
        result.description = f"{item.description} {link}"
    return result


# --- Register ---

@router.post("/register", status_code=201, response_model=ItemOut)
async def register_item(
    request: Request,
    inventory_name: Optional[str] = Form(None),
    description: str = Form(""),
    photo: Optional[UploadFile] = File(None),
    store: InventoryRepository = Depends(get_store),
    photos: PhotoStorage = Depends(get_photos),
    settings: Settings = Depends(get_settings),
):
    if request.headers.get("content-type", "").startswith("application/json"):
        fields = await read_fields(request)
        inventory_name = text_field(fields, "inventory_name")
        description = text_field(fields, "description") or ""

    if not inventory_name or not inventory_name.strip():
        raise ValidationError("Bad Request: inventory_name is required")

    photo_filename = None
    if _has_upload(photo):
        photo_filename = await photos.save_upload(photo, field="photo")

    item = store.create(inventory_name, description, photo_filename)
    return _to_out(item, settings)


# --- List / detail ---

@router.get("/inventory", response_model=List[ItemOut])
def list_items(
    store: InventoryRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    return [_to_out(item, settings) for item in store.list()]


@router.get("/inventory/{item_id}", response_model=ItemOut)
def get_item(
    item_id: str,
    store: InventoryRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    return _to_out(store.get(item_id), settings)


# --- Update ---

@router.put("/inventory/{item_id}", response_model=ItemOut)
async def update_item(
    item_id: str,
    request: Request,
    store: InventoryRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    fields = await read_fields(request)
    item = store.update(item_id, ItemPatch.from_fields(fields))
    return _to_out(item, settings)


# --- Delete ---

@router.delete("/inventory/{item_id}", response_class=PlainTextResponse)
def delete_item(
    item_id: str,
    store: InventoryRepository = Depends(get_store),
    photos: PhotoStorage = Depends(get_photos),
    settings: Settings = Depends(get_settings),
):
    item = store.delete(item_id)
    if settings.prune_replaced_photos:
        photos.discard(item.photo_filename)
    return "Deleted"


# --- Photo ---

@router.get("/inventory/{item_id}/photo")
def get_photo(
    item_id: str,
    store: InventoryRepository = Depends(get_store),
    photos: PhotoStorage = Depends(get_photos),
):
    item = store.get(item_id)
    path = photos.path_for(item.photo_filename)
    return FileResponse(path, media_type=photos.content_type(path.name))


@router.put("/inventory/{item_id}/photo", response_model=ItemOut)
async def replace_photo(
    item_id: str,
    photo: Optional[UploadFile] = File(None),
    store: InventoryRepository = Depends(get_store),
    photos: PhotoStorage = Depends(get_photos),
    settings: Settings = Depends(get_settings),
):
    item = store.get(item_id)
    if not _has_upload(photo):
        raise UploadError()

    filename = await photos.save_upload(photo, field="photo")
    try:
        previous = store.replace_photo(item_id, filename)
    except ItemNotFound:
        # Deleted while the upload was being written.
        photos.discard(filename)
        raise
    if previous and settings.prune_replaced_photos:
        photos.discard(previous)
    return _to_out(item, settings)


# --- Search ---

@router.post("/search", response_model=ItemOut)
async def search(
    request: Request,
    store: InventoryRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    fields = await read_fields(request)
    item = store.get(str(fields.get("id") or ""))
    result = annotate_description(
        item, _is_truthy(fields.get("has_photo")), settings.host, settings.port
    )
    return _to_out(result, settings)
