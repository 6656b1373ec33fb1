from __future__ import annotations

import asyncio
import logging
import os
import signal

from watcher import WATCH_BASE_URL
from watcher.client import HealthClient
from watcher.polling import WatchState, watch_loop

INTERVAL = float(os.getenv("WATCH_INTERVAL", "5"))  # секунды между проверками

logger = logging.getLogger("watcher")


async def run() -> None:
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    async def notify(text: str) -> None:
        logger.info("%s", text)

    state = WatchState()
    client = HealthClient(WATCH_BASE_URL)
    logger.info("Starting health watch for %s/health, interval=%ss", WATCH_BASE_URL, INTERVAL)

    await watch_loop(
        state=state,
        stop_event=stop_event,
        client=client,
        notify=notify,
        base_interval_s=INTERVAL,
    )
    logger.info("Watch stopped: runs=%s failures=%s switches=%s", state.runs, state.failures, state.switches)


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    )
    asyncio.run(run())


if __name__ == "__main__":
    main()
