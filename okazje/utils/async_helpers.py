"""
Async helpers for running blocking code off the event loop.
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable


async def call_threadsafe(fn: Callable, *args, **kwargs) -> Any:
    """
    Run a synchronous function in a worker thread.

    None-valued keyword arguments are dropped so callee defaults apply.
    """
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return await asyncio.to_thread(fn, *args, **filtered_kwargs)
