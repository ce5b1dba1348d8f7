"""
Configuration — reads all settings from environment variables.
Uses python-dotenv for local dev.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

STORE_BACKENDS = ("redis", "memory")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Config:
    redis_url: str = "redis://localhost:6379"
    sites_file: str = "government_websites.json"

    # Crawl settings
    crawl_timeout_seconds: int = 30
    clear_store: bool = False
    verify_tls: bool = False

    store_backend: str = "redis"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        problems = []

        raw_timeout = os.getenv("CRAWL_TIMEOUT_SECONDS", "30")
        try:
            timeout = int(raw_timeout)
            if timeout <= 0:
                raise ValueError
        except ValueError:
            problems.append(f"CRAWL_TIMEOUT_SECONDS must be a positive integer, got {raw_timeout!r}")
            timeout = 0

        backend = os.getenv("STORE_BACKEND", "redis").strip().lower()
        if backend not in STORE_BACKENDS:
            problems.append(
                f"STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got {backend!r}"
            )

        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if log_level not in LOG_LEVELS:
            problems.append(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        if problems:
            raise EnvironmentError(
                "Invalid environment configuration:\n  " + "\n  ".join(problems)
            )

        return cls(
            redis_url=os.getenv("REDIS_URL") or "redis://localhost:6379",
            sites_file=os.getenv("SITES_FILE") or "government_websites.json",
            crawl_timeout_seconds=timeout,
            clear_store=_env_flag("CLEAR_REDIS"),
            verify_tls=_env_flag("CRAWLER_VERIFY_TLS"),
            store_backend=backend,
            log_level=log_level,
        )
