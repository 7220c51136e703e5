"""Websocket channel bridge to the simulation topic.

The channel is a broadcast: every text message published on the topic is
delivered at most once to every other peer, with no acknowledgement. Send
failures are not reported back to the caller because the wire protocol has
nowhere to report them.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, List, Optional, Set

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed

from . import constants

Handler = Callable[[str], None]
Connector = Callable[[str], Awaitable[ClientConnection]]


class Subscription:
    """Handle returned by :meth:`ChannelBridge.subscribe`.

    Closing it removes the handler and releases the channel.
    """

    def __init__(self, bridge: "ChannelBridge", handler: Handler) -> None:
        self._bridge = bridge
        self._handler = handler
        self.closed = False

    async def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._bridge.unsubscribe(self._handler)
        await self._bridge.close()

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class ChannelBridge:
    """Publish and receive text payloads on a fixed hub topic."""

    def __init__(
        self,
        uri: str,
        topic: str = constants.TOPIC,
        connector: Connector = connect,
    ) -> None:
        self.uri = uri
        self.topic = topic
        self.websocket: Optional[ClientConnection] = None
        self._connector = connector
        self._handlers: List[Handler] = []
        self._receiver_task: Optional[asyncio.Task[None]] = None
        self._pending: Set[asyncio.Task[None]] = set()

    @property
    def endpoint(self) -> str:
        return f"{self.uri.rstrip('/')}/{self.topic}"

    async def open(self) -> None:
        self.websocket = await self._connector(self.endpoint)
        self._receiver_task = asyncio.create_task(self._receiver_loop(self.websocket))
        logging.info("Joined channel %s", self.endpoint)

    def subscribe(self, handler: Handler) -> Subscription:
        self._handlers.append(handler)
        return Subscription(self, handler)

    def unsubscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def send(self, payload: Any) -> None:
        """Serialise ``payload`` and publish it without waiting for delivery."""

        message = json.dumps(payload)
        if self.websocket is None:
            logging.debug("Channel %s is not open, dropping %s", self.topic, message)
            return
        task = asyncio.get_running_loop().create_task(self._publish(self.websocket, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _publish(self, websocket: ClientConnection, message: str) -> None:
        try:
            await websocket.send(message)
        except (ConnectionClosed, OSError) as exc:
            logging.debug("Publish on %s failed: %s", self.topic, exc)

    async def _receiver_loop(self, websocket: ClientConnection) -> None:
        try:
            async for message in websocket:
                if not isinstance(message, str):
                    logging.debug("Ignoring binary frame on %s", self.topic)
                    continue
                self._dispatch(message)
        except ConnectionClosed:
            logging.info("Channel %s closed by the hub", self.topic)

    def _dispatch(self, message: str) -> None:
        for handler in list(self._handlers):
            try:
                handler(message)
            except Exception:
                logging.exception("Channel handler failed on %s", self.topic)

    async def close(self) -> None:
        self._handlers.clear()
        if self.websocket is not None:
            await self.websocket.close()
            self.websocket = None
        if self._receiver_task is not None:
            await self._receiver_task
            self._receiver_task = None
