"""
Пакет web: Flask-приложение blue/green демо.
"""

from __future__ import annotations

from flask import Flask

from .config import AppConfig, ConfigValidationError, load_config, validate_config
from .routes import register_routes


def create_app(config: AppConfig) -> Flask:
    """
    Фабрика приложения. Конфиг строится снаружи (один раз) и передаётся сюда явно.
    """
    app = Flask(__name__)
    register_routes(app, config)
    return app


__all__ = [
    "AppConfig",
    "ConfigValidationError",
    "create_app",
    "load_config",
    "validate_config",
]
