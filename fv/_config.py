"""Konfiguracja CLI — zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import importlib
import logging
import os
from typing import Any

from dotenv import find_dotenv, load_dotenv
from rich.logging import RichHandler

load_dotenv(find_dotenv(usecwd=True))

DEFAULT_MODEL = "data_model:User"
DEFAULT_RULES = "data_model:SIGNUP_RULES"


def model_path() -> str:
    return os.getenv("FV_MODEL", DEFAULT_MODEL)


def rules_path() -> str:
    return os.getenv("FV_RULES", DEFAULT_RULES)


def log_level() -> str:
    return os.getenv("FV_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def load_object(path: str) -> Any:
    """Importuje obiekt wskazany ścieżką "pakiet.moduł:atrybut"."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Oczekiwano ścieżki w formacie moduł:atrybut, podano '{path}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError:
        raise ValueError(f"Moduł {module_name} nie ma atrybutu '{attr}'") from None
