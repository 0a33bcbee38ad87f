"""Simple configuration management.

``Settings`` reads configuration from environment variables, with a default
for every field.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Supply Ledger API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: _env("LOG_FILE"))
    # None falls through to the database factory default (prod.db)
    database_path: Optional[str] = field(default_factory=lambda: _env("SUPPLYLEDGER_DB_PATH"))
    host: str = field(default_factory=lambda: _env("SUPPLYLEDGER_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("SUPPLYLEDGER_PORT", "3000")))
