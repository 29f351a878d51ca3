r"""Convenience entry points for retrying plain functions.

RetryExecutor expects a task receiving the attempt index. The helpers in
this module adapt ordinary functions instead:

- retry_call: run ``func(*args, **kwargs)`` once with retries
- retryable: decorate a sync or async function so every call is retried

Example:
    ```pycon
    >>> from aretry import RetryConfig, retryable
    >>> attempts = []
    >>> @retryable(config=RetryConfig(max_attempts=2, initial_delay=0.001))
    ... def divide(a, b):
    ...     attempts.append(b)
    ...     return a / b
    ...
    >>> divide(6, 3)
    2.0
    >>> divide(1, 0)
    Traceback (most recent call last):
        ...
    aretry.exceptions.RetryExhaustedError: Failed to execute task [divide] after 2 attempts.
    >>> attempts
    [3, 0, 0]

    ```
"""

from __future__ import annotations

__all__ = ["is_async_callable", "retry_call", "retryable"]

import functools
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.executor import RetryExecutor
from aretry.executor_async import AsyncRetryExecutor
from aretry.executor_core import task_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import CallbackConfig
    from aretry.config import RetryConfig
    from aretry.policy.base import BaseRetryPolicy
    from aretry.waiter import BaseAsyncWaiter, BaseWaiter

T = TypeVar("T")


def is_async_callable(func: Any) -> bool:
    """Return ``True`` if calling ``func`` returns an awaitable coroutine.

    Coroutine functions, ``functools.partial`` objects wrapping one, and
    instances whose ``__call__`` is a coroutine function are detected.

    Example:
        ```pycon
        >>> import functools
        >>> from aretry.decorators import is_async_callable
        >>> async def fetch(url):
        ...     return url
        ...
        >>> is_async_callable(fetch), is_async_callable(functools.partial(fetch, "a"))
        (True, True)
        >>> is_async_callable(len)
        False

        ```
    """
    while isinstance(func, functools.partial):
        func = func.func
    return inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
        getattr(func, "__call__", None)
    )


def retry_call(
    func: Callable[..., T],
    *args: Any,
    config: RetryConfig | None = None,
    policy: BaseRetryPolicy | None = None,
    backoff: BaseBackoffStrategy | None = None,
    waiter: BaseWaiter | None = None,
    callbacks: CallbackConfig | None = None,
    **kwargs: Any,
) -> T:
    """Call ``func(*args, **kwargs)`` with automatic retries.

    Args:
        func: The function to call. It does not receive the attempt index.
        *args: Positional arguments passed to ``func``.
        config: Retry configuration. Defaults to RetryConfig().
        policy: Retry policy. Defaults to AlwaysRetryPolicy().
        backoff: Backoff strategy. Defaults to GeometricBackoff().
        waiter: Waiter used between attempts.
        callbacks: Optional lifecycle callbacks.
        **kwargs: Keyword arguments passed to ``func``.

    Returns:
        The value returned by ``func``.

    Raises:
        RetryExhaustedError: If every attempt failed or the policy vetoed.
        RetryCancelledError: If a backoff wait was cancelled.

    Example:
        ```pycon
        >>> from aretry import retry_call
        >>> retry_call(int, "42")
        42

        ```
    """
    executor = RetryExecutor(
        lambda attempt: func(*args, **kwargs),  # noqa: ARG005
        config=config,
        policy=policy,
        backoff=backoff,
        waiter=waiter,
        callbacks=callbacks,
        name=task_name(func),
    )
    return executor.call()


def retryable(
    config: RetryConfig | None = None,
    policy: BaseRetryPolicy | None = None,
    backoff: BaseBackoffStrategy | None = None,
    waiter: BaseWaiter | BaseAsyncWaiter | None = None,
    callbacks: CallbackConfig | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate a function so that every call is retried.

    Async callables (see ``is_async_callable``) are detected and wrapped
    with an AsyncRetryExecutor, other callables with a RetryExecutor. A new
    executor is created per call, the configuration objects are shared.

    Args:
        config: Retry configuration. Defaults to RetryConfig().
        policy: Retry policy. Defaults to AlwaysRetryPolicy().
        backoff: Backoff strategy. Defaults to GeometricBackoff().
        waiter: Waiter used between attempts. Must be a BaseAsyncWaiter
            for coroutine functions and a BaseWaiter otherwise.
        callbacks: Optional lifecycle callbacks.

    Returns:
        The decorator.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = task_name(func)

        if is_async_callable(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                executor = AsyncRetryExecutor(
                    lambda attempt: func(*args, **kwargs),  # noqa: ARG005
                    config=config,
                    policy=policy,
                    backoff=backoff,
                    waiter=waiter,
                    callbacks=callbacks,
                    name=name,
                )
                return await executor.call()

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            executor = RetryExecutor(
                lambda attempt: func(*args, **kwargs),  # noqa: ARG005
                config=config,
                policy=policy,
                backoff=backoff,
                waiter=waiter,
                callbacks=callbacks,
                name=name,
            )
            return executor.call()

        return wrapper

    return decorator
