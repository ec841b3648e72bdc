from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "faceit-stats.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Install console and (optionally) JSON-lines file handlers on the root logger.

    The file handler sits behind a ``QueueListener`` so that event-loop code
    never blocks on disk writes. Call ``shutdown_logging`` before exit to
    flush the queue.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if os.getenv("LOG_CONSOLE", "true").strip().lower() == "true":
        console = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter(color=os.getenv("NO_COLOR") is None))
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    # httpx logs every request at INFO; keep that at WARNING unless tracing
    if lvl > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
