"""Global storage holding one value per type."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

__all__ = ["store", "get", "try_get"]

T = TypeVar("T")

_STORAGE: dict[type, Any] = {}


def store(data: Any) -> None:
    """Store data under its exact type, replacing any earlier value of that type."""
    _STORAGE[type(data)] = data


def try_get(kind: type[T]) -> Optional[T]:
    """The value stored for kind, or None if there is none."""
    return _STORAGE.get(kind)


def get(kind: type[T]) -> T:
    """The value stored for kind; raise KeyError if there is none."""
    try:
        return _STORAGE[kind]
    except KeyError:
        raise KeyError(f"no value of type {kind.__name__} in storage") from None