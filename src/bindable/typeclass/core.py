"""@typeclass decorator and per-variant dispatch.

A typeclass is a free function whose behaviour is chosen by the concrete
type of its first argument. Container variants register their own methods
as instances, so ``bind(Present(1), f)`` and ``bind(Failure(e), f)`` reach
``Present.bind`` and ``Failure.bind`` without a shared base class.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(
            f"No instance of '{typeclass_name}' for type '{value_type.__name__}'"
        )


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A typeclass with registered type instances.

    The proxied function supplies the name, docstring and signature. It is
    never called: every dispatch either finds an instance or raises
    NoInstanceError.

    Attributes:
        _self_name: The name of the typeclass function.
        _self_instances: Mapping from variant types to their implementations.

    Example:
        ```python
        @typeclass
        def describe(container) -> str:
            '''Short label for a container.'''

        @describe.instance(Success)
        def describe_success(container: Success) -> str:
            return 'ok'

        describe(success(1))
        # 'ok'
        ```
    """

    def __init__(self, signature_fn: F) -> None:
        super().__init__(signature_fn)
        self._self_name = signature_fn.__name__
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for a specific type.

        Args:
            type_: The type to register the instance for.

        Returns:
            A decorator that registers the implementation and returns it unchanged.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            return fn

        return decorator

    def instances(self) -> tuple[type, ...]:
        """Return the registered types in registration order."""
        return tuple(self._self_instances)

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        # Exact match first, then the MRO for subclasses of a variant.
        for base in type(value).__mro__:
            if base in self._self_instances:
                return self._self_instances[base]
        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on the first argument."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self._find_instance(args[0])
        if instance_fn is None:
            raise NoInstanceError(self._self_name, type(args[0]))
        return instance_fn(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F) -> TypeClass[F]:
    """Decorator to create a typeclass from a function signature.

    Args:
        fn: The function defining the typeclass name and signature.

    Returns:
        A TypeClass instance that dispatches to registered instances.
    """
    return TypeClass(fn)
