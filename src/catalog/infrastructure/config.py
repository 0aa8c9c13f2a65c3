"""Runtime settings read from the environment.

Every setting has a default so the CLI works out of the box from a
checkout; environment variables override them per process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DATA_DIR_ENV = "CATALOG_DATA_DIR"
LOG_LEVEL_ENV = "CATALOG_LOG_LEVEL"
PAGE_SIZE_ENV = "CATALOG_DEFAULT_PAGE_SIZE"


def _get_int(name: str, default: int) -> int:
    """Parse integer environment variable."""
    try:
        return int(os.getenv(name, str(default)))
    except (ValueError, TypeError):
        return default


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    default_page_size: int = 50

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"


def load_settings() -> Settings:
    data_dir = os.getenv(DATA_DIR_ENV)
    return Settings(
        data_dir=Path(data_dir) if data_dir else _PROJECT_ROOT / "data",
        log_level=os.getenv(LOG_LEVEL_ENV, "WARNING").upper(),
        default_page_size=_get_int(PAGE_SIZE_ENV, 50),
    )
