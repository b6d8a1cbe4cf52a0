"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``coursectl.toml`` only holds
overrides. With no file at all the tool runs against an in-memory
database.
"""

from __future__ import annotations

from pydantic import BaseModel

from coursectl.infrastructure.database.engine import DEFAULT_DATABASE_URL


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    url: str = DEFAULT_DATABASE_URL
    echo: bool = False
