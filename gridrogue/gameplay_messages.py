"""Per-entity message channels with subscriber callbacks."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from gridrogue.entity import Entity
from gridrogue.hashed_string import HashedString

M = TypeVar("M", bound="GameplayMessage")

MessageCallback = Callable[[Entity, "GameplayMessage"], None]


class GameplayMessage:
    """Base class for messages sent between entities."""

    def checked(self, message_type: type[M]) -> M:
        """Return this message as ``message_type``; raise TypeError if it is not exactly that type."""
        if type(self) is not message_type:
            raise TypeError(
                f"message is {type(self).__name__}, not {message_type.__name__}"
            )
        return self  # type: ignore[return-value]


class GameplayMessages:
    """Routes messages broadcast on an entity's channels to its subscribers."""

    def __init__(self) -> None:
        self._subscriptions: dict[Entity, dict[HashedString, list[MessageCallback]]] = {}

    def broadcast_entity_message(
        self, caller: Entity, channel: HashedString, message: GameplayMessage
    ) -> None:
        """Call every callback subscribed to ``channel`` of ``caller``."""
        callbacks = self._subscriptions.get(caller, {}).get(channel)
        if not callbacks:
            return
        for callback in list(callbacks):
            callback(caller, message)

    def subscribe_entity_message(
        self, target: Entity, channel: HashedString, callback: MessageCallback
    ) -> None:
        """Subscribe ``callback`` to messages on ``channel`` of ``target``."""
        channels = self._subscriptions.setdefault(target, {})
        channels.setdefault(channel, []).append(callback)