"""Pytest configuration and shared fixtures for bindable tests."""

import pytest


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return 'asyncio'


@pytest.fixture
def recorder():
    """Callback that records its arguments and returns them unchanged.

    Used to prove that short-circuited chains never invoke a callback.
    """

    class Recorder:
        def __init__(self) -> None:
            self.calls: list[object] = []

        def __call__(self, value: object) -> object:
            self.calls.append(value)
            return value

    return Recorder()
