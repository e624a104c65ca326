"""Runtime settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings:

    def __init__(self) -> None:
        self.database_url: str | None = os.getenv("BEERSTOCK_DATABASE_URL") or None
        self.database_echo: bool = (
            os.getenv("BEERSTOCK_DATABASE_ECHO", "False").lower() == "true"
        )
        self.data_dir: Path = Path(
            os.getenv("BEERSTOCK_DATA_DIR", str(_PROJECT_ROOT / "data"))
        )
        self.log_level: str = os.getenv("BEERSTOCK_LOG_LEVEL", "INFO").upper()


def get_settings() -> Settings:
    return Settings()
