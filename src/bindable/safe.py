"""@safe decorator: turn raised exceptions into Failure values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from bindable._logging import get_logger
from bindable.either import Failure, Success

__all__ = ['safe']

_logger = get_logger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Failure.

    Wraps a function so that it returns Success(value) when it returns
    normally and Failure(exception) when it raises one of ``exceptions``.
    Any other exception propagates unchanged.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Either[E, T] instead of T.

    Example:
        ```python
        @safe(exceptions=(ZeroDivisionError,))
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            _logger.debug(
                'Caught exception',
                function=wrapped.__qualname__,
                error_type=type(e).__name__,
                error=str(e),
            )
            return Failure(e)
        return Success(result)

    if func is not None:
        return wrapper(func)
    return wrapper
