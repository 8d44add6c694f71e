"""Path prefix checks and lazily created shared instances."""

from __future__ import annotations

import os
from typing import TypeVar

T = TypeVar("T")

_INSTANCES: dict[type, object] = {}


def is_sub_path(parent: str | os.PathLike[str], child: str | os.PathLike[str]) -> bool:
    """Return True if ``child`` is a textual prefix of ``parent``.

    ``is_sub_path("a/b", "a/")`` is True; ``is_sub_path("b/", "a/")`` is False.
    """
    return os.fspath(parent).startswith(os.fspath(child))


def shared_instance(cls: type[T]) -> T:
    """Return the single shared instance of ``cls``, creating it on first use."""
    try:
        return _INSTANCES[cls]  # type: ignore[return-value]
    except KeyError:
        instance = cls()
        _INSTANCES[cls] = instance
        return instance