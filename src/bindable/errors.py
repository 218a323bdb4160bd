"""Error types: programmer misuse and domain failures carried as values."""

from __future__ import annotations

from typing import Any

__all__ = [
    'DomainError',
    'MissingFieldError',
    'WrongBranchError',
]


class WrongBranchError(RuntimeError):
    """A partial extractor was called on the branch that is not populated.

    Raised by ``Either.left()`` on a Success and ``Either.right()`` on a
    Failure. This signals a bug in the caller, not an expected outcome.
    """

    def __init__(self, branch: str, value: Any) -> None:
        self.branch = branch
        self.value = value
        populated = 'Success' if branch == 'left' else 'Failure'
        super().__init__(f'Called {branch}() on {populated}: {value!r}')


class DomainError(Exception):
    """Validation failed after a successful decode."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(DomainError):
    """A required field is absent from a decoded document."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'Required field {field!r} is missing')
