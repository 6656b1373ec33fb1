"""
Тесты операторских скриптов (healthcheck, проверка env-шаблонов).
"""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from scripts import check_env_templates, healthcheck


class FakeResponse:
    def __init__(self, status_code: int, payload: object = None, json_error: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self) -> object:
        if self._json_error:
            raise ValueError("no json")
        return self._payload


def _patch_get(monkeypatch, response: object) -> None:
    def fake_get(url: str, timeout: float):
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(healthcheck.requests, "get", fake_get)


def test_probe_healthy(monkeypatch) -> None:
    _patch_get(monkeypatch, FakeResponse(200, {"status": "healthy", "version": "green"}))
    ok, reason = healthcheck.probe("http://x/health")
    assert ok is True
    assert "green" in reason


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(503, {"status": "healthy"}),
        FakeResponse(200, {"status": "starting"}),
        FakeResponse(200, json_error=True),
        requests.ConnectionError("refused"),
    ],
)
def test_probe_unhealthy(monkeypatch, response: object) -> None:
    _patch_get(monkeypatch, response)
    ok, _ = healthcheck.probe("http://x/health")
    assert ok is False


def test_healthcheck_main_exits_non_zero(monkeypatch) -> None:
    _patch_get(monkeypatch, FakeResponse(500))
    with pytest.raises(SystemExit) as exc:
        healthcheck.main("http://x/health")
    assert exc.value.code == 1


def test_default_url_uses_port(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert healthcheck.default_url() == "http://127.0.0.1:8080/health"
    monkeypatch.delenv("PORT")
    assert healthcheck.default_url() == "http://127.0.0.1:3000/health"


def test_parse_keys_skips_comments() -> None:
    text = "# comment\nexport PORT=3000\n\nVERSION = blue\nGARBAGE\n"
    assert check_env_templates.parse_keys(text) == {"PORT", "VERSION"}


def test_check_env_templates_missing_key(tmp_path: Path) -> None:
    good = tmp_path / ".env.blue.example"
    good.write_text("PORT=3000\nVERSION=blue\n", encoding="utf-8")
    bad = tmp_path / ".env.green.example"
    bad.write_text("PORT=3001\n", encoding="utf-8")

    check_env_templates.main([good])
    with pytest.raises(SystemExit) as exc:
        check_env_templates.main([good, bad])
    assert "VERSION" in str(exc.value.code)


def test_repo_env_templates_are_complete(monkeypatch) -> None:
    monkeypatch.chdir(Path(__file__).resolve().parent.parent)
    check_env_templates.main()
