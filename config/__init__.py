import importlib
import os

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module() -> str:
    # APP_ENV picks the module; anything unrecognised means development.
    env = os.getenv("APP_ENV", "development").strip().lower()
    return f"config.{_ENV_ALIASES.get(env, 'development')}"


def load_settings():
    return importlib.import_module(get_settings_module())
