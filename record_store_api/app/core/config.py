"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  Override values via
environment variables before importing this module, or build a
``Settings`` instance by hand and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Record Store API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty only the console handler
    # is attached (see ``core.logging_config``).
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Level for the ``record_store_api`` loggers only; empty means they
    # follow ``log_level``.
    store_log_level: str = field(default_factory=lambda: os.getenv("STORE_LOG_LEVEL", ""))

    # Page size used by the list endpoint when the client does not send
    # ``limit``.  ``max_page_limit`` caps what clients may request.
    default_page_limit: int = field(default_factory=lambda: int(os.getenv("DEFAULT_PAGE_LIMIT", "50")))
    max_page_limit: int = field(default_factory=lambda: int(os.getenv("MAX_PAGE_LIMIT", "1000")))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
