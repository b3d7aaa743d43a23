"""Off-loop execution for the lock-guarded wheel registry."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache, partial
from typing import ParamSpec, TypeVar

__all__ = ["THREAD_PREFIX", "run_blocking"]

P = ParamSpec("P")
T = TypeVar("T")

THREAD_PREFIX = "wheel-spin"


@lru_cache(maxsize=1)
def _executor() -> ThreadPoolExecutor:
    workers = max(1, min(8, os.cpu_count() or 1))
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix=THREAD_PREFIX)


async def run_blocking(func: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor(), partial(func, *args, **kwargs))
