"""
Settings for the task manager, read from TASK_MANAGER_* environment variables.
"""

import os
from typing import List, Union

ENV_PREFIX = "TASK_MANAGER"


def _env(name: str, default: str) -> str:
    value = os.getenv(f"{ENV_PREFIX}_{name}")
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_bool(name: str, default: bool) -> bool:
    return _env(name, str(default)).lower() in {"1", "true", "yes", "on"}


def _env_origins(name: str, default: str) -> Union[str, List[str]]:
    raw = _env(name, default)
    if raw == "*":
        return raw
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# Base URL of a running API, used by the client and the MCP bridge
API_URL = _env("API_URL", "http://localhost:5001")


class Config:
    SQLALCHEMY_DATABASE_URI = _env("DATABASE_URL", "sqlite:///tasks.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = _env_origins("CORS_ORIGINS", "*")
    HOST = _env("HOST", "127.0.0.1")
    PORT = int(_env("PORT", "5001"))
    DEBUG = _env_bool("DEBUG", False)


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"
