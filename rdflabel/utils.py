"""Generic helpers (logging, profiling)."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Iterable, List, TypeVar

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

T = TypeVar("T")


def profile_time(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        elapsed = time.time() - start_time
        logging.info("[PROFILE] Function '%s' executed in %.3f seconds", func.__name__, elapsed)
        return result

    return wrapper


def _dedupe_preserve(items: Iterable[T]) -> List[T]:
    seen: set = set()
    output: List[T] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output


def _truncate_text(text: Any, max_len: int = 160) -> str:
    text = str(text)
    if len(text) <= max_len:
        return text
    return text[: max_len - 3].rstrip() + "..."
