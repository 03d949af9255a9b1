import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cache_dir: Path = BASE_DIR / "cache"
    # Off by default: replaced and deleted photos stay in the cache dir.
    prune_replaced_photos: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("INVENTORY_HOST", DEFAULT_HOST),
            port=int(os.getenv("INVENTORY_PORT", DEFAULT_PORT)),
            cache_dir=Path(os.getenv("INVENTORY_CACHE_DIR", str(BASE_DIR / "cache"))),
            prune_replaced_photos=_env_flag("INVENTORY_PRUNE_PHOTOS"),
            log_level=os.getenv("INVENTORY_LOG_LEVEL", "INFO").upper(),
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "cache_dir" in changes:
            changes["cache_dir"] = Path(changes["cache_dir"])
        if "port" in changes:
            changes["port"] = int(changes["port"])
        return replace(self, **changes)
