"""Runtime configuration read from the environment (and an optional .env)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from schemas import RunStatus

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _get_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _get_bool(name: str, default: bool) -> bool:
    raw = _get_env(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    completion_delay_ms: int = 3000
    initial_status: RunStatus = RunStatus.COMPLETED
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False

    @property
    def completion_delay(self) -> float:
        return self.completion_delay_ms / 1000.0

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()

        delay_ms = _get_int("VQE_COMPLETION_DELAY_MS", cls.completion_delay_ms)
        if delay_ms < 0:
            raise ValueError(f"VQE_COMPLETION_DELAY_MS must be >= 0, got {delay_ms}")

        raw_status = (_get_env("VQE_INITIAL_STATUS") or cls.initial_status.value).strip().lower()
        try:
            initial_status = RunStatus(raw_status)
        except ValueError:
            allowed = ", ".join(s.value for s in RunStatus)
            raise ValueError(f"VQE_INITIAL_STATUS must be one of {allowed}, got {raw_status!r}") from None

        log_level = (_get_env("LOG_LEVEL") or cls.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            completion_delay_ms=delay_ms,
            initial_status=initial_status,
            log_level=log_level,
            host=_get_env("HOST") or cls.host,
            port=_get_int("PORT", cls.port),
            debug=_get_bool("FLASK_DEBUG", cls.debug),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
