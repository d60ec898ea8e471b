import asyncio
import logging
import sys
from typing import TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s> %(message)s"


class AsyncQueueHandler(logging.Handler):
    """Hands formatted records to an asyncio queue without blocking."""

    def __init__(self, queue: asyncio.Queue):
        super().__init__()
        self.queue = queue

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.queue.put_nowait((record.levelno, self.format(record)))
        except Exception:
            self.handleError(record)


async def log_worker(
    queue: asyncio.Queue,
    stop_event: asyncio.Event,
    level: int = logging.INFO,
    stream: TextIO = None,
) -> None:
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S"))
    handler.setLevel(level)

    while not stop_event.is_set() or not queue.empty():
        try:
            lvl, msg = await asyncio.wait_for(queue.get(), timeout=0.5)
        except asyncio.TimeoutError:
            continue
        try:
            if lvl >= level:
                handler.emit(logging.LogRecord("durcalc", lvl, "", 0, msg, None, None))
        except Exception as e:
            sys.stderr.write(f"[log_worker error] {e}\n")
        finally:
            queue.task_done()

    handler.flush()


def get_logger(
    queue: asyncio.Queue, name: str = "durcalc", level: int = logging.INFO
) -> logging.Logger:
    logger = logging.getLogger(name)
    existing = [h for h in logger.handlers if isinstance(h, AsyncQueueHandler)]
    if existing:
        # Rebind to the current queue; a previous event loop may own the old one.
        for handler in existing:
            handler.queue = queue
    else:
        handler = AsyncQueueHandler(queue)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
