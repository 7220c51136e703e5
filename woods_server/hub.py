"""Topic membership and fan-out for the broadcast channel."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, Protocol, Set, Union

from . import constants

Message = Union[str, bytes]


class Peer(Protocol):
    async def send(self, message: Message) -> None:
        ...


class TopicHub:
    """Forward every message on a topic to all other members of it.

    Delivery is at most once and unacknowledged: a member whose send fails
    is dropped from the topic and the publisher is never told.
    """

    def __init__(self) -> None:
        self.topics: Dict[str, Set[Peer]] = {}
        self._broadcast_lock = asyncio.Lock()

    def join(self, topic: str, peer: Peer) -> None:
        self.topics.setdefault(topic, set()).add(peer)

    def leave(self, topic: str, peer: Peer) -> None:
        members = self.topics.get(topic)
        if members is None:
            return
        members.discard(peer)
        if not members:
            del self.topics[topic]

    def members(self, topic: str) -> Iterable[Peer]:
        return tuple(self.topics.get(topic, ()))

    async def publish(self, topic: str, sender: Peer, message: Message) -> int:
        """Send ``message`` to every member of ``topic`` except ``sender``.

        Returns the number of members that accepted the message.
        """

        if message == constants.KEEPALIVE_MESSAGE:
            return 0
        delivered = 0
        async with self._broadcast_lock:
            dropped = []
            for peer in self.members(topic):
                if peer is sender:
                    continue
                try:
                    await peer.send(message)
                except Exception:
                    logging.exception("Failed to deliver on topic %s", topic)
                    dropped.append(peer)
                else:
                    delivered += 1
            for peer in dropped:
                self.leave(topic, peer)
        return delivered
