"""Small pipelines built from parse_text, bind, map and cata.

These show the intended call-site shape: decode once at the boundary, chain
dependent steps with bind, transform with map, and finish with a total
reducer (cata or value_or) so both outcomes are handled.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

import msgspec

from bindable.decode import parse_text
from bindable.either import Failure, Success, failure, success
from bindable.errors import DomainError, MissingFieldError
from bindable.maybe import AbsentType, Present
from bindable.safe import safe

__all__ = [
    'FetchById',
    'Rate',
    'User',
    'apply_markup',
    'character_height',
    'customer_price',
    'extract_numeric_field',
    'fetch_character_height',
    'get_user_email',
    'require_field',
]


class Rate(msgspec.Struct, rename='camel'):
    """Pricing response body."""

    customer_price: float
    id: str


class User(msgspec.Struct, rename='camel'):
    first_name: str
    last_name: str
    email: str


class FetchById(Protocol):
    """Async source of raw response text, e.g. an HTTP GET by id."""

    async def __call__(self, character_id: int, /) -> str: ...


def require_field(name: str) -> Callable[[Any], Success[Any] | Failure[MissingFieldError]]:
    """Build a bind callback that looks up ``name`` in a decoded object.

    The field counts as present whenever the key exists, even with a null
    value; non-object documents fail like a missing field.
    """

    def lookup(document: Any) -> Success[Any] | Failure[MissingFieldError]:
        if isinstance(document, dict) and name in document:
            return success(document[name])
        return failure(MissingFieldError(name))

    return lookup


def _require_number(name: str) -> Callable[[Any], Success[float] | Failure[DomainError]]:
    def check(value: Any) -> Success[float] | Failure[DomainError]:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return success(value)
        return failure(DomainError(f'Field {name!r} is not a number: {value!r}'))

    return check


def extract_numeric_field(
    raw: str | bytes, field: str = 'customerPrice'
) -> Success[float] | Failure[None]:
    """Pull a numeric field out of a JSON document.

    Decode errors, a missing field and a non-numeric value all collapse into
    ``Failure(None)``; callers that need the cause should chain
    ``parse_text`` and ``require_field`` themselves.

    Examples:
        >>> extract_numeric_field('{"customerPrice": 69, "id": "x"}')
        Success(value=69)
        >>> extract_numeric_field('{{notjson')
        Failure(error=None)
    """
    return (
        parse_text(raw)
        .bind(require_field(field))
        .bind(_require_number(field))
        .cata(lambda _: failure(None), success)
    )


def customer_price(raw: str | bytes) -> Success[float] | Failure[None]:
    """Typed variant of extract_numeric_field: the Rate schema does the checking."""
    return parse_text(raw, type=Rate).cata(
        lambda _: failure(None),
        lambda rate: success(rate.customer_price),
    )


def get_user_email(raw: str | bytes) -> Success[str] | Failure[DomainError]:
    return parse_text(raw, type=User).cata(
        lambda _: failure(DomainError('No data in user')),
        lambda user: success(user.email),
    )


@safe(exceptions=(ValueError,))
def _to_int(text: str) -> int:
    return int(text)


def character_height(raw: str | bytes) -> Success[int] | Failure[Exception]:
    """Decode a character record and return its height as an int.

    The first failing step wins: a DecodeError for malformed text, a
    DomainError when ``height`` is missing or empty, a ValueError when it is
    not an integer.
    """

    def height_of(character: Any) -> Success[Any] | Failure[DomainError]:
        height = character.get('height') if isinstance(character, dict) else None
        if height:
            return success(height)
        return failure(DomainError('no data in response'))

    return parse_text(raw).bind(height_of).bind(_to_int)


async def fetch_character_height(
    fetch: FetchById, character_id: int
) -> Success[int] | Failure[Exception]:
    """Await the fetch, then run the synchronous character_height pipeline.

    Errors raised by ``fetch`` itself are not caught here.
    """
    raw = await fetch(character_id)
    return character_height(raw)


def apply_markup(
    price: Present[float] | AbsentType, factor: float = 1.05, default: float = 0
) -> float:
    """Scale a possibly-missing price, falling back to ``default``."""
    return price.map(lambda p: p * factor).value_or(default)
