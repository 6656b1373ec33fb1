# web/routes.py
"""
Маршруты web-сервиса.

Конфиг приходит параметром в register_routes() и замыкается в хендлерах:
глобального состояния нет, на каждый запрос ничего не пересчитываем, кроме времени.
"""

from __future__ import annotations

import logging
import socket
from datetime import datetime

from flask import Flask, Response, jsonify

from .config import AppConfig
from .pages import format_current_time, render_index_page

logger = logging.getLogger("web.routes")


def register_routes(app: Flask, config: AppConfig) -> None:
    version = config.version

    @app.route("/")
    def index() -> Response:
        html = render_index_page(
            version_label=version,
            hostname=socket.gethostname(),
            current_time=format_current_time(datetime.now()),
        )
        logger.debug("index rendered: version=%s", version)
        return Response(html, status=200, mimetype="text/html")

    @app.route("/health")
    def health():
        # healthcheck для оркестратора: живы + какая версия отвечает
        return jsonify({"status": "healthy", "version": version}), 200

    @app.route("/ready")
    def ready():
        # прогревать нечего: готовы сразу после старта
        return jsonify({"status": "ok"}), 200
