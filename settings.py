from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_DOCUMENT_VERSION_ENV = "EEML_DOCUMENT_VERSION"
_JSON_INDENT_ENV = "EEML_JSON_INDENT"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    document_version: Optional[str]
    json_indent: int
    log_level: str


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_json_indent(default: int) -> int:
    value = os.getenv(_JSON_INDENT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        document_version=_read_optional_env(_DOCUMENT_VERSION_ENV, None),
        json_indent=_read_json_indent(2),
        log_level=_read_log_level("INFO"),
    )
