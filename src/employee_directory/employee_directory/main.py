from __future__ import annotations

import importlib
import logging
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container


@dataclass(frozen=True)
class AppSettings:
    settings_module: str
    debug: bool
    log_level: str
    prompt: str
    show_banner: bool
    script_encoding: str


def load_settings() -> AppSettings:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    return AppSettings(
        settings_module=settings_module,
        debug=bool(getattr(settings, "DEBUG", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "WARNING")).upper(),
        prompt=str(getattr(settings, "PROMPT", "")),
        show_banner=bool(getattr(settings, "SHOW_BANNER", True)),
        script_encoding=str(getattr(settings, "SCRIPT_ENCODING", "utf-8")),
    )


def configure_logging(settings: AppSettings) -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[employee-directory] %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: AppSettings | None = None) -> tuple[AppSettings, Container]:
    settings = settings or load_settings()
    configure_logging(settings)
    logging.getLogger(__name__).debug("settings=%s", settings.settings_module)
    return settings, build_container()
