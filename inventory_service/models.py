from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from inventory_service.errors import ValidationError


def _generate_id() -> str:
    return uuid.uuid4().hex


def text_field(fields: dict, key: str) -> Optional[str]:
    """Return ``fields[key]`` if it is a string, ``None`` if absent; reject anything else."""
    value = fields.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"Bad Request: {key} must be a string")


@dataclass
class InventoryItem:
    id: str
    name: str
    description: str = ""
    photo_filename: Optional[str] = None

    @property
    def has_photo(self) -> bool:
        return bool(self.photo_filename)


@dataclass(frozen=True)
class ItemPatch:
    """Field-level update. ``None`` means the field was not supplied."""

    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: dict) -> ItemPatch:
        # An empty value, or a blank name, means "leave as is", not "clear".
        name = text_field(fields, "name")
        description = text_field(fields, "description")
        return cls(
            name=name if name and name.strip() else None,
            description=description or None,
        )


class ItemOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    photo_url: Optional[str] = Field(default=None, alias="photoUrl")
