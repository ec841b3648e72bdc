"""Per-task log context carried in a contextvar.

Each asyncio task gets a copy of the context at creation time, so values
bound inside one aggregation never leak into a concurrent one.
"""
from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


@contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    token = _context.set(current)
    try:
        yield current
    finally:
        _context.reset(token)
