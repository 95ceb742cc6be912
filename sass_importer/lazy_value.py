"""A value that is computed at most once, on first access."""

import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")

_UNSET: Any = object()


def freeze_recursively(value: Any) -> Any:
    """Return an immutable equivalent of dicts, lists and sets."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze_recursively(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_recursively(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze_recursively(v) for v in value)
    return value


class LazyValue(Generic[T]):
    """Holds a value, or a zero-argument callable computing it.

    The callable runs at most once, even when first accessed from several
    threads. After `freeze()`, container values are returned immutable.
    """

    def __init__(self, value_or_factory: "T | Callable[[], T]") -> None:
        """Store a plain value, or a factory to call on first access."""
        self._lock = threading.Lock()
        self._frozen = False
        if callable(value_or_factory):
            self._factory: Callable[[], T] | None = value_or_factory
            self._value: T = _UNSET
        else:
            self._factory = None
            self._value = value_or_factory

    @property
    def computed(self) -> bool:
        """Whether the value is available without calling the factory."""
        return self._value is not _UNSET

    @property
    def frozen(self) -> bool:
        """Whether freeze() has been called."""
        return self._frozen

    def value(self) -> T:
        """Return the value, computing it on first call."""
        if self._value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    factory = cast(Callable[[], T], self._factory)
                    result = factory()
                    if self._frozen:
                        result = freeze_recursively(result)
                    self._value = result
                    self._factory = None
        return self._value

    def map(self, fn: Callable[[T], U]) -> "LazyValue[U]":
        """Return a new lazy value applying fn to this one's value."""
        return LazyValue(lambda: fn(self.value()))

    def freeze(self) -> "LazyValue[T]":
        """Make the held value immutable, now or once it is computed."""
        with self._lock:
            self._frozen = True
            if self._value is not _UNSET:
                self._value = freeze_recursively(self._value)
        return self
