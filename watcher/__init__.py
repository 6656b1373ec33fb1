"""
Пакет watcher: наблюдение за тем, какая версия (blue/green) сейчас отвечает на /health.

Базовый URL берём из окружения; HEALTH_URL собирается из него и заканчивается на /health.
"""

from __future__ import annotations

import os


def normalize_base_url(url: str) -> str:
    """
    Убираем завершающий '/', чтобы потом корректно склеивать пути:
    "http://lb:3000" и "http://lb:3000/" -> "http://lb:3000"
    """
    return url.strip().rstrip("/")


WATCH_BASE_URL: str = normalize_base_url(os.getenv("WATCH_BASE_URL", "http://localhost:3000"))

HEALTH_URL: str = f"{WATCH_BASE_URL}/health"


__all__ = [
    "WATCH_BASE_URL",
    "HEALTH_URL",
    "normalize_base_url",
]
