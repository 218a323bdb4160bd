"""The bind/map contract shared by Maybe and Either.

Every container variant implements two methods:

- ``bind(f)`` sequences a callback that itself returns a container. It is
  skipped entirely when the receiver is Absent or a Failure.
- ``map(f)`` applies a plain function to the wrapped value and re-wraps the
  result, propagating Absent or Failure untouched.

Both must satisfy the monad laws (left identity, right identity,
associativity) and the functor laws (identity, composition).

The free functions ``bind`` and ``fmap`` expose the same contract as
typeclasses, so generic pipeline code can be written without knowing which
container kind it receives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from bindable.typeclass import typeclass

__all__ = ['Monad', 'bind', 'fmap']


@runtime_checkable
class Monad[A](Protocol):
    """Structural type of a chainable container holding an ``A``."""

    def bind[B](self, f: Callable[[A], Monad[B]]) -> Monad[B]: ...

    def map[B](self, f: Callable[[A], B]) -> Monad[B]: ...


@typeclass
def bind(container: Any, f: Callable[[Any], Any]) -> Any:
    """Sequence ``f`` after ``container``; equivalent to ``container.bind(f)``."""


@typeclass
def fmap(container: Any, f: Callable[[Any], Any]) -> Any:
    """Transform the value inside ``container``; equivalent to ``container.map(f)``."""
