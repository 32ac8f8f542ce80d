"""Configuration module."""

from .database import get_async_engine, get_async_session_local, init_models
from .logging import configure_logging
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "get_async_engine",
    "get_async_session_local",
    "init_models",
]
