"""Maybe type: Present[A] | AbsentType for values that may be missing."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeIs

import msgspec

from bindable.capability import bind, fmap

if TYPE_CHECKING:
    from bindable.either import Failure, Success

__all__ = ['Absent', 'AbsentType', 'Maybe', 'Present', 'absent', 'present']


class Present[A](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Maybe holding a value of type A.

    ``None`` is never a present value: build containers with ``present()``,
    which collapses ``None`` into ``Absent``. Falsy values such as ``0``,
    ``''`` or ``False`` are present.

    Examples:
        >>> present(100).map(lambda p: p * 2)
        Present(value=200)
        >>> present(0).is_present()
        True
        >>> present(3).value_or(0)
        3
    """

    value: A

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError('Present cannot hold None; use present() or Absent')

    def is_present(self) -> TypeIs[Present[A]]:
        """Return True since this is Present.

        This method provides type narrowing - after checking is_present(),
        the type checker knows the container is Present[A].
        """
        return True

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def bind[B](self, f: Callable[[A], Present[B] | AbsentType]) -> Present[B] | AbsentType:
        """Apply a function that returns a Maybe to the contained value.

        Args:
            f: Function that takes A and returns Maybe[B].

        Returns:
            The Maybe returned by f.
        """
        return f(self.value)

    def map[B](self, f: Callable[[A], B | None]) -> Present[B] | AbsentType:
        """Apply a function to the contained value.

        A function returning None produces Absent, so later stages of a
        chain are skipped rather than handed a None.

        Args:
            f: Function to apply to the Present value.

        Returns:
            present(f(value)).
        """
        return present(f(self.value))

    def value_or(self, default: A) -> A:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def value_or_else(self, factory: Callable[[], A]) -> A:  # noqa: ARG002
        """Return the contained value without calling the factory."""
        return self.value

    def filter(self, predicate: Callable[[A], bool]) -> Present[A] | AbsentType:
        """Return self if the predicate holds for the value, else Absent."""
        if predicate(self.value):
            return self
        return Absent

    def or_else(self, factory: Callable[[], Present[A] | AbsentType]) -> Present[A]:  # noqa: ARG002
        """Return self unchanged since this is Present."""
        return self

    def to_either[L](self, error: L) -> Success[A]:  # noqa: ARG002
        """Convert to Either, returning Success(value)."""
        from bindable.either import Success

        return Success(self.value)


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Maybe.

    There is a single absent state regardless of the type the container
    would otherwise hold. Use the ``Absent`` constant (or ``absent()``)
    rather than instantiating this class; separate instances still compare
    equal.

    Examples:
        >>> Absent.map(str.lower)
        AbsentType()
        >>> absent().value_or(0)
        0
    """

    def is_present(self) -> TypeIs[Present[object]]:
        """Return False since this is Absent."""
        return False

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent.

        This method provides type narrowing - after checking is_absent(),
        the type checker knows the container is AbsentType.
        """
        return True

    def bind[A, B](self, f: Callable[[A], Present[B] | AbsentType]) -> AbsentType:  # noqa: ARG002
        """Return Absent without calling the function."""
        return self

    def map[A, B](self, f: Callable[[A], B]) -> AbsentType:  # noqa: ARG002
        """Return Absent without calling the function."""
        return self

    def value_or[A](self, default: A) -> A:
        """Return the default since there is no value."""
        return default

    def value_or_else[A](self, factory: Callable[[], A]) -> A:
        """Compute and return a default since there is no value."""
        return factory()

    def filter[A](self, predicate: Callable[[A], bool]) -> AbsentType:  # noqa: ARG002
        """Return Absent since there is nothing to test."""
        return self

    def or_else[A](
        self, factory: Callable[[], Present[A] | AbsentType]
    ) -> Present[A] | AbsentType:
        """Recover by returning the Maybe produced by the factory."""
        return factory()

    def to_either[L](self, error: L) -> Failure[L]:
        """Convert to Either, returning Failure(error)."""
        from bindable.either import Failure

        return Failure(error)


Absent: AbsentType = AbsentType()
"""Canonical instance representing a missing value."""


type Maybe[A] = Present[A] | AbsentType


def present[A](value: A | None) -> Present[A] | AbsentType:
    """Wrap a value, collapsing None into Absent.

    Only ``None`` counts as missing; ``0``, ``''`` and other falsy values
    are wrapped as Present.
    """
    if value is None:
        return Absent
    return Present(value)


def absent() -> AbsentType:
    """Return the canonical Absent container."""
    return Absent


for _variant in (Present, AbsentType):
    bind.instance(_variant)(_variant.bind)
    fmap.instance(_variant)(_variant.map)
