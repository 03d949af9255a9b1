"""Error taxonomy shared by the store, the photo storage and the routes."""
from typing import Optional


class InventoryError(Exception):
    status_code = 500
    detail = "Internal error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class ValidationError(InventoryError):
    status_code = 400
    detail = "Bad Request"


class UploadError(InventoryError):
    status_code = 400
    detail = "No photo uploaded"


class ItemNotFound(InventoryError):
    status_code = 404
    detail = "Item not found"


class PhotoNotFound(InventoryError):
    status_code = 404
    detail = "Photo not found"
