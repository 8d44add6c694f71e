"""Input actions that turn raw key events into discrete or axis callbacks."""

from __future__ import annotations

import enum
import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar


class InputEventType(enum.IntFlag):
    """Kinds of key event an action may react to."""

    NONE = 0
    KEY_DOWN = 1 << 0
    KEY_UP = 1 << 1
    KEY_HELD = 1 << 2

    DOWN_OR_HELD = KEY_DOWN | KEY_HELD
    ANY = KEY_DOWN | KEY_UP | KEY_HELD


class InputActionName(enum.Enum):
    """Names of the game's input actions."""

    NONE = 0
    MOVE_HORIZONTAL = 1
    MOVE_VERTICAL = 2


class GenericHandle:
    """A process-wide unique identifier; the very first handle has id 0 and is falsy."""

    __slots__ = ("_id",)

    _ids: ClassVar[itertools.count] = itertools.count()

    def __init__(self) -> None:
        self._id = next(GenericHandle._ids)

    @property
    def id(self) -> int:
        return self._id

    def __bool__(self) -> bool:
        return self._id != 0

    def __int__(self) -> int:
        return self._id

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GenericHandle):
            return self._id == other._id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"GenericHandle({self._id})"


class InputAction(ABC):
    """Something that reacts to key events for a set of keycodes."""

    @abstractmethod
    def on_input_event(self, keycode: int, is_down: bool) -> None:
        """Handle one key event."""

    @abstractmethod
    def relevant_keycodes(self) -> list[int]:
        """Return the keycodes this action wants to receive."""


@dataclass(frozen=True)
class _DiscreteBinding:
    keycode: int
    event_filter: int


@dataclass(frozen=True)
class _AxisBinding:
    keycode: int
    value: int
    event_filter: int


class DiscreteInputAction(InputAction):
    """Fires argument-less callbacks when a bound key produces a matching event."""

    def __init__(self) -> None:
        self._callbacks: dict[GenericHandle, Callable[[], None]] = {}
        self._down_codes: set[int] = set()
        self._keys: list[_DiscreteBinding] = []

    def add_keycode(self, keycode: int, event_filter: int = InputEventType.ANY) -> None:
        """Bind ``keycode``, reacting to the event kinds in ``event_filter``."""
        self._keys.append(_DiscreteBinding(keycode, int(event_filter)))

    def add_callback(self, callback: Callable[[], None]) -> GenericHandle:
        """Register ``callback`` and return a handle for removing it."""
        handle = GenericHandle()
        self._callbacks[handle] = callback
        return handle

    def remove_callback(self, handle: GenericHandle) -> None:
        """Forget the callback behind ``handle``; unknown handles are ignored."""
        self._callbacks.pop(handle, None)

    def on_input_event(self, keycode: int, is_down: bool) -> None:
        event_type = InputEventType.KEY_HELD
        if is_down and keycode not in self._down_codes:
            event_type = InputEventType.KEY_DOWN
            self._down_codes.add(keycode)
        elif not is_down:
            event_type = InputEventType.KEY_UP
            self._down_codes.discard(keycode)

        for binding in self._keys:
            if binding.keycode == keycode and binding.event_filter & event_type:
                self._invoke()

    def relevant_keycodes(self) -> list[int]:
        return [binding.keycode for binding in self._keys]

    def _invoke(self) -> None:
        for callback in list(self._callbacks.values()):
            callback()


class AxisInputAction(InputAction):
    """Fires callbacks with a per-key axis value when a bound key produces a matching event."""

    def __init__(self) -> None:
        self._callbacks: dict[GenericHandle, Callable[[int], None]] = {}
        self._axes: list[_AxisBinding] = []
        self._down_codes: list[int] = []

    def add_keycode_axis(
        self, keycode: int, value: int, event_filter: int = InputEventType.ANY
    ) -> None:
        """Bind ``keycode`` to the axis ``value`` for the event kinds in ``event_filter``."""
        self._axes.append(_AxisBinding(keycode, value, int(event_filter)))

    def add_callback(self, callback: Callable[[int], None]) -> GenericHandle:
        """Register ``callback`` and return a handle for removing it."""
        handle = GenericHandle()
        self._callbacks[handle] = callback
        return handle

    def remove_callback(self, handle: GenericHandle) -> None:
        """Forget the callback behind ``handle``; unknown handles are ignored."""
        self._callbacks.pop(handle, None)

    def on_input_event(self, keycode: int, is_down: bool) -> None:
        # A key not yet tracked always counts as pressed, whatever the event says.
        event_type = InputEventType.KEY_HELD
        if keycode not in self._down_codes:
            event_type = InputEventType.KEY_DOWN
            self._down_codes.append(keycode)
        elif not is_down:
            event_type = InputEventType.KEY_UP
            self._down_codes.remove(keycode)

        for axis in self._axes:
            if axis.keycode == keycode and axis.event_filter & event_type:
                self._invoke(axis.value)

    def relevant_keycodes(self) -> list[int]:
        return [axis.keycode for axis in self._axes]

    def _invoke(self, value: int) -> None:
        for callback in list(self._callbacks.values()):
            callback(value)