"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., MAX_PRIORITY env var → Settings.MAX_PRIORITY)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.

The priority range is a front-end rule: the API schemas and the console
enforce it, the JobScheduler itself accepts any number.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Job validation (front ends only) ────────────────────────
    MIN_PRIORITY: int = 1              # 1 = highest priority
    MAX_PRIORITY: int = 10             # 10 = lowest priority
    DEFAULT_PRIORITY: int = 5
    JOB_NAME_MAX_LENGTH: int = 255

    # ── Capacity ────────────────────────────────────────────────
    MAX_PENDING_JOBS: int = 100        # API refuses new jobs beyond this

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import this everywhere
settings = Settings()
