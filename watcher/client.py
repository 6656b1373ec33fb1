# watcher/client.py
"""
Async-клиент /health.

Идея:
- watcher НЕ должен падать, если сервис недоступен: ошибка уходит в HealthResult.error
- запросы быстрые и с таймаутом
"""

from __future__ import annotations

import asyncio
import time
import uuid
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import aiohttp

from . import normalize_base_url


@dataclass(frozen=True)
class HealthResult:
    ok: bool
    status: Optional[int]
    version: Optional[str]
    error: Optional[str]
    duration_ms: int
    request_id: str


def parse_health_payload(data: Any) -> Tuple[bool, Optional[str]]:
    """
    Разбор тела /health.

    Возвращает (healthy, version):
    - healthy только при status == "healthy"
    - version — непустая строка или None
    """
    if not isinstance(data, dict):
        return False, None

    healthy = data.get("status") == "healthy"
    version = data.get("version")
    if isinstance(version, str) and version.strip():
        return healthy, version.strip()
    return healthy, None


class HealthClient:
    def __init__(self, base_url: str, timeout_s: float = 1.5) -> None:
        self.base_url = normalize_base_url(base_url)
        self.timeout_s = timeout_s

    async def _get(self, path: str, request_id: str) -> HealthResult:
        url = f"{self.base_url}{path}"
        t0 = time.perf_counter()
        timeout = aiohttp.ClientTimeout(total=self.timeout_s)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers={"X-Request-ID": request_id}) as r:
                    status = r.status
                    try:
                        data = await r.json(content_type=None)
                    except ValueError:
                        data = None
            healthy, version = parse_health_payload(data)
            dt = int((time.perf_counter() - t0) * 1000)
            error = None
            if not (200 <= status < 300):
                error = f"http {status}"
            elif not healthy:
                error = "unhealthy payload"
            return HealthResult(
                ok=error is None,
                status=status,
                version=version,
                error=error,
                duration_ms=dt,
                request_id=request_id,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            dt = int((time.perf_counter() - t0) * 1000)
            return HealthResult(
                ok=False,
                status=None,
                version=None,
                error=str(e) or e.__class__.__name__,
                duration_ms=dt,
                request_id=request_id,
            )

    async def check_health(self) -> HealthResult:
        """
        Один запрос /health; каждый вызов идёт в сеть.
        """
        return await self._get("/health", request_id=str(uuid.uuid4()))
