from __future__ import annotations

import pytest

from web import AppConfig, create_app


@pytest.fixture
def make_client(monkeypatch):
    """
    Фабрика test_client с заданной версией и фиксированным hostname.
    """
    monkeypatch.setattr("web.routes.socket.gethostname", lambda: "test-host")

    def _make(version: str = "blue", port: int = 3000):
        app = create_app(AppConfig(port=port, version=version))
        return app.test_client()

    return _make
