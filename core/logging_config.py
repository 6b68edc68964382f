"""Logging setup and a latency decorator for pipeline steps."""

import asyncio
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Callable

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@contextmanager
def _timed(logger: logging.Logger, operation_name: str):
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        elapsed = (time.perf_counter() - start) * 1000
        logger.error(f"{operation_name} failed after {elapsed:.1f} ms: {e}")
        raise
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(f"{operation_name} took {elapsed:.1f} ms")


def log_latency(operation_name: str):
    """Log how long the wrapped step takes; works on sync and async callables."""
    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        if asyncio.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                with _timed(logger, operation_name):
                    return await func(*args, **kwargs)
            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            with _timed(logger, operation_name):
                return func(*args, **kwargs)
        return sync_wrapper

    return decorator
