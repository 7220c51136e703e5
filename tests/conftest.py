"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from typing import List, Optional

import pytest


class FakeConnection:
    """In-memory stand-in for a websocket connection."""

    def __init__(self, fail_sends: bool = False) -> None:
        self.sent: List[str] = []
        self.closed = False
        self.fail_sends = fail_sends
        self.uri: Optional[str] = None
        self._inbox: asyncio.Queue = asyncio.Queue()

    def feed(self, message) -> None:
        self._inbox.put_nowait(message)

    async def send(self, message) -> None:
        if self.fail_sends:
            raise OSError("connection reset")
        self.sent.append(message)

    def __aiter__(self) -> "FakeConnection":
        return self

    async def __anext__(self):
        message = await self._inbox.get()
        if message is None:
            raise StopAsyncIteration
        return message

    async def close(self) -> None:
        self.closed = True
        self._inbox.put_nowait(None)


@pytest.fixture
def fake_connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def connector(fake_connection: FakeConnection):
    async def _connect(uri: str) -> FakeConnection:
        fake_connection.uri = uri
        return fake_connection

    return _connect


SINGLE_BODY_SNAPSHOT = '[[1,[{"Body":{"x":5,"y":6,"z":0,"sx":10,"sy":10,"sz":10}}]]]'


@pytest.fixture
def single_body_snapshot() -> str:
    return SINGLE_BODY_SNAPSHOT
