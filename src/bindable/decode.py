"""Decode adapter: JSON text in, Either[DecodeError, T] out.

This is the one place where an exception raised by an external collaborator
is turned into a container value. Downstream code sees malformed input only
as a Failure travelling through bind/map.
"""

from __future__ import annotations

from typing import Any

import msgspec

from bindable.either import Failure, Success
from bindable.safe import safe

__all__ = ['parse_text']


@safe(exceptions=(msgspec.DecodeError,))
def _decode(raw: str | bytes, type: Any) -> Any:  # noqa: A002
    return msgspec.json.decode(raw, type=type)


def parse_text[T](
    raw: str | bytes,
    *,
    type: type[T] = Any,  # noqa: A002
) -> Success[T] | Failure[msgspec.DecodeError]:
    """Decode JSON text, capturing decoder errors in the failure branch.

    Args:
        raw: JSON document as str or UTF-8 bytes.
        type: Expected result type, passed to ``msgspec.json.decode``.
            Values that parse but do not match it fail with
            ``msgspec.ValidationError`` (a ``DecodeError`` subclass).

    Returns:
        Success(decoded value), or Failure(the DecodeError raised by msgspec,
        message untouched).

    Examples:
        >>> parse_text('{"id": 1}')
        Success(value={'id': 1})
        >>> parse_text('[1, 2]', type=list[int]).map(sum)
        Success(value=3)
    """
    return _decode(raw, type=type)
