"""Minimal DI container: register by type/protocol, resolve dependencies."""
from __future__ import annotations

import inspect
import sys
from typing import Any, Callable, TypeVar, get_args

T = TypeVar("T")

_NONE_TYPE = type(None)


def _resolve_annotation(ann: Any, cls: type[Any]) -> Any:
    """Resolve an annotation to the class to inject; `X | None` and Optional[X] resolve to X.

    String annotations (from __future__ annotations) are looked up in the module of cls.
    """
    if isinstance(ann, str):
        parts = [part.strip() for part in ann.split("|") if part.strip() != "None"]
        if len(parts) != 1:
            return ann
        name = parts[0]
        mod = sys.modules.get(cls.__module__)
        if mod is not None and hasattr(mod, name):
            return getattr(mod, name)
        return name
    args = get_args(ann)
    if _NONE_TYPE in args:
        rest = [arg for arg in args if arg is not _NONE_TYPE]
        if len(rest) == 1:
            return rest[0]
    return ann


def _instantiate_with_container(container: Container, cls: type[T]) -> T:
    """Create an instance of cls, resolving __init__ dependencies from the container.

    Parameters with a default are left to the default when the container has no registration.
    """
    sig = inspect.signature(cls)
    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if name == "self" or param.annotation is inspect.Parameter.empty:
            continue
        ann = _resolve_annotation(param.annotation, cls)
        if param.default is not inspect.Parameter.empty and not container.has(ann):
            continue
        kwargs[name] = container.resolve(ann)
    return cls(**kwargs)


class Container:
    """
    Register by type (or key) and resolve via factory.
    Allows registering an implementation for a protocol/abstraction.
    """

    def __init__(self) -> None:
        self._registry: dict[type[Any] | str, Callable[[], Any]] = {}
        self._singletons: dict[type[Any] | str, Any] = {}
        self._singleton_keys: set[type[Any] | str] = set()

    def register(self, key: type[T] | type[Any] | str, factory: Callable[[], T], singleton: bool = True) -> None:
        """Register a factory for a type or string key."""
        self._registry[key] = factory
        self._singletons.pop(key, None)
        if singleton:
            self._singleton_keys.add(key)
        else:
            self._singleton_keys.discard(key)

    def register_instance(self, key: type[T] | type[Any] | str, instance: T) -> None:
        """Register a ready-made instance."""
        self._registry[key] = lambda: instance
        self._singletons[key] = instance
        self._singleton_keys.add(key)

    def register_class(self, cls: type[T], singleton: bool = True) -> None:
        """Register a class: on resolve an instance is created with dependencies from the container."""
        self.register(key=cls, factory=lambda: _instantiate_with_container(self, cls), singleton=singleton)

    def has(self, key: type[Any] | str) -> bool:
        return key in self._registry

    def resolve(self, key: type[T] | type[Any] | str) -> T:
        """Resolve an instance by type or key."""
        if key not in self._registry:
            raise KeyError(f"No registration for {key}")
        if key in self._singletons:
            return self._singletons[key]
        instance = self._registry[key]()
        if key in self._singleton_keys:
            self._singletons[key] = instance
        return instance
