# watcher/polling.py
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .client import HealthClient, HealthResult

logger = logging.getLogger("watcher.polling")


@dataclass
class WatchState:
    runs: int = 0
    failures: int = 0
    consecutive_failures: int = 0
    successes: int = 0
    switches: int = 0

    last_run_ts: Optional[float] = None
    last_success_ts: Optional[float] = None
    last_switch_at: Optional[float] = None

    last_error: Optional[str] = None
    last_duration_ms: Optional[int] = None

    # Последняя увиденная метка версии (None — ещё ни разу не видели)
    current_version: Optional[str] = None


def _label(version: Optional[str]) -> str:
    return (version or "unknown").upper()


def build_live_text(current: Optional[str]) -> str:
    return f"Live version: {_label(current)}"


def build_switch_text(previous: Optional[str], current: Optional[str]) -> str:
    return f"Switched: {_label(previous)} -> {_label(current)}"


async def watch_loop(
    *,
    state: WatchState,
    stop_event: asyncio.Event,
    client: HealthClient,
    notify: Callable[[str], Awaitable[None]],
    base_interval_s: float = 5.0,
    max_backoff_s: float = 60.0,
) -> None:
    """
    Polling /health и отслеживание переключения blue/green.

    Правило:
    - первый успешный ответ: сообщаем текущую версию один раз
    - далее: сообщаем только если метка версии изменилась
    - при ошибках интервал удваивается до max_backoff_s, успех его сбрасывает
    """
    interval_s = base_interval_s

    while not stop_event.is_set():
        state.last_run_ts = time.time()
        state.runs += 1

        res: HealthResult = await client.check_health()
        state.last_duration_ms = res.duration_ms

        if not res.ok:
            state.failures += 1
            state.consecutive_failures += 1
            state.last_error = res.error or "health_error"
            interval_s = min(max_backoff_s, max(base_interval_s, interval_s * 2))
            logger.warning(
                "health check failed: status=%s error=%s next_in=%.1fs",
                res.status,
                state.last_error,
                interval_s,
            )
        else:
            state.last_success_ts = time.time()
            state.last_error = None
            state.consecutive_failures = 0
            interval_s = base_interval_s

            first_seen = state.successes == 0
            state.successes += 1

            if first_seen:
                state.current_version = res.version
                await notify(build_live_text(res.version))
            elif res.version != state.current_version:
                previous = state.current_version
                state.current_version = res.version
                state.switches += 1
                state.last_switch_at = time.time()
                logger.info("version switch detected: %s -> %s", previous, res.version)
                await notify(build_switch_text(previous, res.version))

        try:
            await asyncio.wait_for(stop_event.wait(), timeout=interval_s)
        except asyncio.TimeoutError:
            pass
