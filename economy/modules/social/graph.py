"""Social graph collaborator used to decide who may exchange gifts."""

from __future__ import annotations

from typing import Iterable, Protocol


class SocialGraph(Protocol):
    async def can_exchange_gifts(self, sender_id: str, receiver_id: str) -> bool:
        ...


class OpenSocialGraph:
    """Lets any two distinct accounts exchange gifts."""

    async def can_exchange_gifts(self, sender_id: str, receiver_id: str) -> bool:
        return sender_id != receiver_id


class ChannelSocialGraph:
    """Permits gifting only between accounts that share an open channel.

    Channels are unordered pairs, mirroring a direct-message conversation
    between two users.
    """

    def __init__(self, channels: Iterable[tuple[str, str]] = ()) -> None:
        self._channels: set[frozenset[str]] = set()
        for first, second in channels:
            self.open_channel(first, second)

    def open_channel(self, first: str, second: str) -> None:
        if first == second:
            raise ValueError("a channel needs two distinct accounts")
        self._channels.add(frozenset((first, second)))

    def close_channel(self, first: str, second: str) -> None:
        self._channels.discard(frozenset((first, second)))

    async def can_exchange_gifts(self, sender_id: str, receiver_id: str) -> bool:
        return sender_id != receiver_id and frozenset((sender_id, receiver_id)) in self._channels
