"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Does not override variables already set in the environment
load_dotenv()


class Settings(BaseModel):
    """Settings read from CP_* environment variables."""

    max_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Thread pool size for each fan-out level (None = one thread per task)",
    )
    capacity_max_quantity: int = Field(
        default=1 << 20,
        ge=2,
        description="Ceiling on the quantity probed by the capacity search",
    )
    log_level: str = Field(default="INFO", description="Logging level for the CLI")


def get_settings() -> Settings:
    max_workers = os.getenv("CP_MAX_WORKERS")
    return Settings(
        max_workers=int(max_workers) if max_workers else None,
        capacity_max_quantity=int(os.getenv("CP_CAPACITY_MAX_QUANTITY", str(1 << 20))),
        log_level=os.getenv("CP_LOG_LEVEL", "INFO").upper(),
    )
