"""
Конфигурация web-сервиса (blue/green демо).

Идея:
- читаем окружение ОДИН раз при старте процесса;
- дальше работаем с неизменяемым AppConfig, который явно передаём в create_app();
- хендлеры не лезут в os.environ сами.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 3000
DEFAULT_VERSION = "blue"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigValidationError(ValueError):
    """Невалидная конфигурация: процесс не должен стартовать."""


@dataclass(frozen=True)
class AppConfig:
    port: int = DEFAULT_PORT
    version: str = DEFAULT_VERSION
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL


def _env_str(environ: Mapping[str, str], key: str, default: str, strip: bool = True) -> str:
    # Пустая строка = "не задано" (как `process.env.X || default`).
    value = environ.get(key) or ""
    if strip:
        value = value.strip()
    return value or default


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigValidationError(f"PORT must be an integer, got {raw!r}") from None
    return port


def validate_config(cfg: AppConfig) -> None:
    """
    Проверяем то, что иначе упало бы позже и менее понятно.
    """
    errors: list[str] = []

    if not (1 <= cfg.port <= 65535):
        errors.append(f"PORT out of range 1..65535: {cfg.port}")
    if not cfg.version:
        errors.append("VERSION must not be empty")
    if cfg.log_level not in _LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {cfg.log_level!r}")

    if errors:
        raise ConfigValidationError("; ".join(errors))


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Собираем AppConfig из окружения.

    PORT     -> int, по умолчанию 3000
    VERSION  -> метка версии (открытое множество, обычно blue/green), по умолчанию blue
                берётся как есть, без strip: " blue" != "blue"
    HOST     -> адрес для bind, по умолчанию 0.0.0.0
    LOG_LEVEL -> уровень логирования, по умолчанию INFO
    """
    env = os.environ if environ is None else environ

    cfg = AppConfig(
        port=_parse_port(_env_str(env, "PORT", str(DEFAULT_PORT))),
        version=_env_str(env, "VERSION", DEFAULT_VERSION, strip=False),
        host=_env_str(env, "HOST", DEFAULT_HOST),
        log_level=_env_str(env, "LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
    validate_config(cfg)
    logging.getLogger("web.config").debug("config loaded: %s", cfg)
    return cfg
