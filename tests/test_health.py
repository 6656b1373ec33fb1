from __future__ import annotations

import pytest


@pytest.mark.parametrize("version", ["blue", "green", "canary"])
def test_health_reports_version(make_client, version: str) -> None:
    client = make_client(version=version)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.mimetype == "application/json"
    assert resp.get_json() == {"status": "healthy", "version": version}


def test_health_unknown_path_is_404(make_client) -> None:
    client = make_client()
    assert client.get("/nope").status_code == 404
