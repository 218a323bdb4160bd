"""Either type: Failure[L] | Success[R], biased towards Success."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from bindable.capability import bind, fmap
from bindable.errors import WrongBranchError

if TYPE_CHECKING:
    from bindable.maybe import AbsentType, Present

__all__ = ['Either', 'Failure', 'Success', 'failure', 'success']


class Success[R](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Either containing a value of type R.

    ``bind`` and ``map`` act on this branch only; a Failure passes through
    them untouched.

    Examples:
        >>> success(5).map(lambda x: x * 2)
        Success(value=10)
        >>> success(5).cata(str, lambda x: x + 1)
        6
    """

    value: R

    def is_success(self) -> TypeIs[Success[R]]:
        """Return True since this is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the container is Success[R].
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def bind[L, R2](self, f: Callable[[R], Failure[L] | Success[R2]]) -> Failure[L] | Success[R2]:
        """Apply a function that returns an Either to the contained value.

        Args:
            f: Function that takes R and returns Either[L, R2].

        Returns:
            The Either returned by f.
        """
        return f(self.value)

    def map[R2](self, f: Callable[[R], R2]) -> Success[R2]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Success value.

        Returns:
            Success containing f(value).
        """
        return Success(f(self.value))

    def map_failure[F](self, f: Callable[[object], F]) -> Success[R]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def cata[X](
        self,
        on_failure: Callable[[object], X],  # noqa: ARG002
        on_success: Callable[[R], X],
    ) -> X:
        """Reduce both branches to one result by calling ``on_success``."""
        return on_success(self.value)

    def left(self) -> NoReturn:
        """Raise since there is no failure value.

        Raises:
            WrongBranchError: Always.
        """
        raise WrongBranchError('left', self.value)

    def right(self) -> R:
        """Return the contained Success value."""
        return self.value

    def value_or(self, default: R) -> R:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def to_maybe(self) -> Present[R] | AbsentType:
        """Convert to Maybe via present(), so a None value becomes Absent."""
        from bindable.maybe import present

        return present(self.value)

    def swap(self) -> Failure[R]:
        """Move the value to the failure branch."""
        return Failure(self.value)


class Failure[L](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Either containing an error of type L.

    The error is carried verbatim; it may be an exception instance, a
    struct, or None when the caller does not care about the cause.

    Examples:
        >>> failure('boom').map(lambda x: x * 2)
        Failure(error='boom')
        >>> failure('boom').value_or(0)
        0
    """

    error: L

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[L]]:
        """Return True since this is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the container is Failure[L].
        """
        return True

    def bind[R, R2](self, f: Callable[[R], Failure[L] | Success[R2]]) -> Failure[L]:  # noqa: ARG002
        """Return self without calling the function."""
        return self

    def map[R, R2](self, f: Callable[[R], R2]) -> Failure[L]:  # noqa: ARG002
        """Return self without calling the function."""
        return self

    def map_failure[F](self, f: Callable[[L], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the Failure value.

        Returns:
            Failure containing f(error).
        """
        return Failure(f(self.error))

    def cata[R, X](
        self,
        on_failure: Callable[[L], X],
        on_success: Callable[[R], X],  # noqa: ARG002
    ) -> X:
        """Reduce both branches to one result by calling ``on_failure``."""
        return on_failure(self.error)

    def left(self) -> L:
        """Return the contained Failure value."""
        return self.error

    def right(self) -> NoReturn:
        """Raise since there is no success value.

        Raises:
            WrongBranchError: Always.
        """
        raise WrongBranchError('right', self.error)

    def value_or[R](self, default: R) -> R:
        """Return the default since this is Failure."""
        return default

    def to_maybe(self) -> AbsentType:
        """Convert to Maybe, returning Absent."""
        from bindable.maybe import Absent

        return Absent

    def swap(self) -> Success[L]:
        """Move the error to the success branch."""
        return Success(self.error)


type Either[L, R] = Failure[L] | Success[R]


def success[R](value: R) -> Success[R]:
    """Construct the success branch."""
    return Success(value)


def failure[L](error: L) -> Failure[L]:
    """Construct the failure branch."""
    return Failure(error)


for _variant in (Success, Failure):
    bind.instance(_variant)(_variant.bind)
    fmap.instance(_variant)(_variant.map)
