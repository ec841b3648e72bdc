"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str] | None = None) -> int:
    bootstrap_logging(
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="faceit-stats.jsonl",
    )
    try:
        # Lazy import keeps logging configured before any module-level loggers fire
        from presentation.cli import StatsCommand

        return asyncio.run(StatsCommand().run(list(sys.argv[1:] if argv is None else argv)))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
