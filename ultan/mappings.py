"""
Helpers for dict-shaped data: dot-path access, pair conversion, emptiness and cloning.
"""

import copy
from collections.abc import Hashable, Iterable, Mapping, MutableMapping, Sized
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def set_nested_property(obj: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Assign ``value`` at a dot-delimited path, creating intermediate dicts.

    A missing or falsy intermediate is replaced with a new dict. ``obj`` is
    mutated in place.
    """
    *parents, leaf = path.split(".")
    current = obj
    for key in parents:
        if not current.get(key):
            current[key] = {}
        current = current[key]
    current[leaf] = value


def get_nested_property(obj: Any, path: str) -> Any:
    """Read a dot-delimited path, returning ``None`` once a level is missing.

    A falsy intermediate stops the walk, so a path through ``0`` or ``""``
    reads as ``None`` too.
    """
    current = obj
    for key in path.split("."):
        if not current or not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def object_to_array(obj: Mapping[K, V]) -> list[tuple[K, V]]:
    return list(obj.items())


def array_to_object(pairs: Iterable[tuple[K, V]]) -> dict[K, V]:
    return {key: value for key, value in pairs}


def is_empty(value: Any) -> bool:
    """True for ``None`` and for empty strings, sequences and mappings."""
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def deep_clone(value: V) -> V:
    return copy.deepcopy(value)
