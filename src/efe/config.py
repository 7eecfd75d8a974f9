# -----------------------------------------------------------------------------
# Configuration
# Purpose: Environment-driven settings. An optional .env file is loaded first
# (python-dotenv), then values are read with os.getenv.
#   CATALOG_PATH  YAML catalog to serve (default: packaged catalog)
#   LOG_LEVEL     stdlib logging level name (default: INFO)
#   API_HOST      bind host for the HTTP surface (default: 127.0.0.1)
#   API_PORT      bind port for the HTTP surface (default: 8000)
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .catalog import DEFAULT_CATALOG_PATH

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    catalog_path: Path
    log_level: str = "INFO"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @staticmethod
    def from_env(dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        port = os.getenv("API_PORT", "8000")
        try:
            api_port = int(port)
        except ValueError:
            raise ValueError(f"API_PORT must be an integer, got {port!r}") from None
        return Settings(
            catalog_path=Path(os.getenv("CATALOG_PATH") or DEFAULT_CATALOG_PATH),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            api_host=os.getenv("API_HOST", "127.0.0.1"),
            api_port=api_port,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
