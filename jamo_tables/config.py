# jamo_tables/config.py
from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()  # picks up .env in CWD

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# ====== CONFIG (ENV) ======
JAMO_TABLES_FORMAT       = os.getenv("JAMO_TABLES_FORMAT", "c")
JAMO_TABLES_PREFIX       = os.getenv("JAMO_TABLES_PREFIX", "comp")
JAMO_TABLES_LINKER_SCOPE = os.getenv("JAMO_TABLES_LINKER_SCOPE") or None
JAMO_TABLES_LOG_LEVEL    = os.getenv("JAMO_TABLES_LOG_LEVEL", "WARNING").upper()


class Settings(BaseModel):
    format: str = Field("c", description="c | python | json")
    prefix: str = Field("comp", min_length=1, description="master-side array name prefix")
    linker_scope: Optional[str] = Field(None, description="e.g. Character::CharacterImpl; None = no linker block")
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Re-read the environment (module constants are only the import-time snapshot)."""
    return Settings(
        format=os.getenv("JAMO_TABLES_FORMAT", JAMO_TABLES_FORMAT),
        prefix=os.getenv("JAMO_TABLES_PREFIX", JAMO_TABLES_PREFIX),
        linker_scope=os.getenv("JAMO_TABLES_LINKER_SCOPE") or JAMO_TABLES_LINKER_SCOPE,
        log_level=os.getenv("JAMO_TABLES_LOG_LEVEL", JAMO_TABLES_LOG_LEVEL).upper(),
    )


def setup_logging(level: str = JAMO_TABLES_LOG_LEVEL) -> None:
    # stderr only; stdout is reserved for the generated tables
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
