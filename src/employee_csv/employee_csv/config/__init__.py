from __future__ import annotations

import importlib
import os
from types import ModuleType

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean env var; accepts 1/0, true/false, yes/no, on/off."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def get_settings_module() -> str:
    # APP_ENV selects the settings module; default is development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "production"

    if env in {"test", "testing"}:
        return "testing"

    return "development"


def load_settings() -> ModuleType:
    """Import the settings module for APP_ENV.

    Settings read the environment at module level, so the module is reloaded
    on every call to pick up changes made after the first import.
    """
    module = importlib.import_module(f".{get_settings_module()}", package=__name__)
    return importlib.reload(module)
