"""
Timer-based call wrappers and heartbeat staleness checks.

``debounce`` schedules work on the running asyncio event loop
(``loop.call_later``), so its wrapper must be called from code running inside
that loop. ``throttle`` measures its window with a monotonic clock and needs a
running loop only for ``async def`` targets. Coroutine functions are run as
tasks on the loop; their failures are logged, not raised. All durations are in
seconds.
"""

import asyncio
import functools
import inspect
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, ParamSpec, TypeVar

from ultan.log import get_logger

logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

DEFAULT_DEBOUNCE_DELAY = 0.3
DEFAULT_ZOMBIE_LIMIT = 300.0

# Strong references to running handler tasks until they finish
_background_tasks: set[asyncio.Task[Any]] = set()


def _log_task_result(task: asyncio.Task[Any]) -> None:
    _background_tasks.discard(task)
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error(
            "scheduled_handler_failed",
            task=task.get_name(),
            error=str(error),
        )


def _invoke(func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
    """Call ``func``; coroutine functions become tasks on the running loop."""
    if not inspect.iscoroutinefunction(func):
        return func(*args, **kwargs)
    loop = asyncio.get_running_loop()
    task = loop.create_task(func(*args, **kwargs), name=getattr(func, "__name__", None))
    _background_tasks.add(task)
    task.add_done_callback(_log_task_result)
    return task


def debounce(func: Callable[P, Any], delay: float = DEFAULT_DEBOUNCE_DELAY) -> Callable[P, None]:
    """
    Trailing debounce.

    Each call cancels the pending invocation and schedules a new one ``delay``
    seconds out, so ``func`` runs once per quiet period with the arguments of
    the last call. ``async def`` targets are started as tasks when the timer
    fires. The returned wrapper also has a ``cancel()`` method that drops the
    pending invocation.
    """
    pending: asyncio.TimerHandle | None = None

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> None:
        nonlocal pending
        loop = asyncio.get_running_loop()
        if pending is not None:
            pending.cancel()
        pending = loop.call_later(delay, _fire, args, kwargs)

    def _fire(args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        nonlocal pending
        pending = None
        _invoke(func, args, kwargs)

    def cancel() -> None:
        nonlocal pending
        if pending is not None:
            pending.cancel()
            pending = None

    wrapper.cancel = cancel  # type: ignore[attr-defined]
    return wrapper


def throttle(func: Callable[P, R], limit: float) -> Callable[P, Any]:
    """
    Leading-edge throttle.

    The first call runs immediately and opens a window of ``limit`` seconds;
    calls inside the window are dropped and return ``None``. Suppressed calls
    are not replayed when the window closes. Executed calls return the result
    of ``func``, or the scheduled ``asyncio.Task`` for ``async def`` targets.
    """
    window_end: float | None = None

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        nonlocal window_end
        now = time.monotonic()
        if window_end is not None and now < window_end:
            logger.debug("throttled_call_dropped", function=getattr(func, "__name__", repr(func)))
            return None
        window_end = now + limit
        return _invoke(func, args, kwargs)

    return wrapper


def _to_datetime(value: datetime | str | float) -> datetime:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        moment = datetime.fromisoformat(value)
    else:
        moment = datetime.fromtimestamp(value, UTC)
    # Naive timestamps are treated as UTC
    return moment if moment.tzinfo else moment.replace(tzinfo=UTC)


def is_zombie(last_seen: datetime | str | float, limit: float = DEFAULT_ZOMBIE_LIMIT) -> bool:
    """
    Detect a stale session or stagnant heartbeat.

    Args:
        last_seen: Last heartbeat as a datetime, ISO-8601 string or epoch seconds
        limit: Allowed silence in seconds (default five minutes)

    Returns:
        True if more than ``limit`` seconds have passed since ``last_seen``.
    """
    elapsed = (datetime.now(UTC) - _to_datetime(last_seen)).total_seconds()
    return elapsed > limit
