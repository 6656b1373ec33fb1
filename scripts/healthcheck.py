"""
Проба для HEALTHCHECK контейнера: 0 — здоров, 1 — нет.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

import requests


def default_url() -> str:
    port = (os.getenv("PORT") or "3000").strip()
    return f"http://127.0.0.1:{port}/health"


def probe(url: str, timeout_s: float = 2.0) -> Tuple[bool, str]:
    try:
        resp = requests.get(url, timeout=timeout_s)
    except requests.RequestException as e:
        return False, f"request failed: {e}"

    if resp.status_code != 200:
        return False, f"http {resp.status_code}"

    try:
        data = resp.json()
    except ValueError:
        return False, "body is not JSON"

    if not isinstance(data, dict) or data.get("status") != "healthy":
        return False, f"unhealthy: {data}"

    return True, f"healthy, version={data.get('version')}"


def main(url: Optional[str] = None) -> None:
    target = url or os.getenv("HEALTHCHECK_URL") or default_url()
    ok, reason = probe(target)
    print(f"[healthcheck] {target}: {reason}", flush=True)
    if not ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
