"""Typeclass utilities for dispatching on container variants."""

from bindable.typeclass.core import NoInstanceError, TypeClass, typeclass

__all__ = [
    'NoInstanceError',
    'TypeClass',
    'typeclass',
]
