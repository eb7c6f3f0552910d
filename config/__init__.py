import os

DEFAULT_SETTINGS_MODULE = "config.development"

# APP_ENV aliases; anything else (or unset) runs with development settings
_SETTINGS_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "").strip().lower()
    return _SETTINGS_BY_ENV.get(env, DEFAULT_SETTINGS_MODULE)
