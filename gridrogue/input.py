"""Buffered key events dispatched to registered input actions."""

from __future__ import annotations

from gridrogue.input_action import InputAction


class Input:
    """Queues key events and delivers them to the actions bound to each key."""

    def __init__(self) -> None:
        self._actions: dict[int, list[InputAction]] = {}
        self._buffer: list[tuple[int, bool]] = []

    def push_onto_input_buffer(self, key: int, is_key_down: bool) -> None:
        """Queue one key event for the next call to :meth:`process_input_buffer`."""
        self._buffer.append((key, is_key_down))

    def register_action(self, action: InputAction) -> None:
        """Deliver future events for each of the action's keycodes to ``action``."""
        for key in action.relevant_keycodes():
            self._actions.setdefault(key, []).append(action)

    def process_input_buffer(self) -> None:
        """Deliver every queued event in order, then empty the queue."""
        pending, self._buffer = self._buffer, []
        for key, is_key_down in pending:
            self._process_input_event(key, is_key_down)

    def _process_input_event(self, key: int, is_key_down: bool) -> None:
        for action in list(self._actions.get(key, ())):
            action.on_input_event(key, is_key_down)