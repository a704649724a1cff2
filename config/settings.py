import os
from enum import StrEnum


def parse_bool(value) -> bool:
    """Interpret a config value; strings follow the env var convention."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def env_bool(key, default=False):
    return parse_bool(os.getenv(key, str(default)))


class ExecutionMode(StrEnum):
    development = "development"
    test = "test"
    production = "production"


def parse_execution_mode(value) -> ExecutionMode:
    """Unknown or empty values resolve to production (mutations applied)."""
    raw = str(value or "").strip().lower()
    try:
        return ExecutionMode(raw)
    except ValueError:
        return ExecutionMode.production


def execution_mode() -> ExecutionMode:
    """Resolve the execution mode from APP_ENV (or FLASK_ENV)."""
    return parse_execution_mode(os.getenv("APP_ENV") or os.getenv("FLASK_ENV"))


def load_settings() -> dict:
    """Read the app configuration from the environment once, at startup."""
    return {
        "EXECUTION_MODE": execution_mode(),
        "VIEWS_COLLECTION": os.getenv("VIEWS_COLLECTION", "posts"),
        "VIEWS_ATOMIC_INCREMENT": env_bool("VIEWS_ATOMIC_INCREMENT"),
    }
