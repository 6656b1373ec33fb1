"""
Рендер HTML-страницы демо.

Цвет фона зависит только от метки версии:
- "blue"            -> градиент A
- всё остальное     -> градиент B (в т.ч. "green" и любые другие значения)
"""

from __future__ import annotations

from datetime import datetime

from flask import render_template

BLUE_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"
GREEN_GRADIENT = "linear-gradient(135deg, #f093fb 0%, #f5576c 100%)"


def background_for(version_label: str) -> str:
    return BLUE_GRADIENT if version_label == "blue" else GREEN_GRADIENT


def format_current_time(now: datetime) -> str:
    # %c — локале-зависимое представление даты и времени
    return now.strftime("%c")


def render_index_page(*, version_label: str, hostname: str, current_time: str) -> str:
    """
    Типизированный вызов шаблона index.html.

    Вызывать нужно внутри app/request context (render_template берёт Jinja env из Flask).
    """
    return render_template(
        "index.html",
        background=background_for(version_label),
        version_title=version_label.upper(),
        hostname=hostname,
        current_time=current_time,
    )
