"""
Reliability utilities.

Maps store failures onto the API error contract and keeps stray
asynchronous failures from going unnoticed.
"""

import asyncio
import logging
from functools import wraps
from typing import Callable, Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taxibook.app.core.exceptions import PersistenceError

logger = logging.getLogger("taxibook.reliability")


def persistence_guard(action: str) -> Callable:
    """
    Decorator for gateway functions taking an `AsyncSession` first.

    Any `SQLAlchemyError` rolls the session back and is re-raised as a
    `PersistenceError` whose message is `action`.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(db: AsyncSession, *args, **kwargs) -> Any:
            try:
                return await func(db, *args, **kwargs)
            except SQLAlchemyError as e:
                await db.rollback()
                raise PersistenceError(action, str(e)) from e
        return wrapper
    return decorator


def _log_unhandled_failure(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    exc = context.get("exception")
    message = context.get("message", "Unhandled asynchronous failure")
    if exc is not None:
        logger.error("Unhandled asynchronous failure: %s", message, exc_info=exc)
    else:
        logger.error("Unhandled asynchronous failure: %s", message)


def install_unhandled_failure_hook(loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
    """
    Log failures nobody awaited (e.g. exceptions in fire-and-forget tasks)
    instead of letting them pass silently. The process keeps running.
    """
    loop = loop or asyncio.get_running_loop()
    loop.set_exception_handler(_log_unhandled_failure)
