"""Entry point for the asyncio based broadcast hub."""

from __future__ import annotations

import argparse
import asyncio
import logging

from websockets.asyncio.server import ServerConnection, serve
from websockets.exceptions import ConnectionClosed

from . import constants
from .hub import TopicHub


def topic_from_path(path: str) -> str:
    """Return the topic named by a request ``path`` such as ``/woods``."""

    topic = path.split("?", 1)[0].strip("/")
    return topic or constants.DEFAULT_TOPIC


class HubServer:
    """Accept websocket peers and relay their messages per topic."""

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.hub = TopicHub()

    def listen(self) -> serve:
        """Return the websocket server context; port 0 picks a free port."""

        return serve(self._handle_client, self.host, self.port)

    async def start(self) -> None:
        async with self.listen() as server:
            logging.info("Hub listening on %s:%s", self.host, self.port)
            await server.serve_forever()

    async def _handle_client(self, websocket: ServerConnection) -> None:
        topic = topic_from_path(websocket.request.path if websocket.request else "/")
        self.hub.join(topic, websocket)
        logging.info("Peer %s joined topic %s", websocket.remote_address, topic)
        try:
            async for message in websocket:
                await self.hub.publish(topic, websocket, message)
        except ConnectionClosed:
            logging.debug("Peer %s dropped without a close frame", websocket.remote_address)
        finally:
            self.hub.leave(topic, websocket)
            logging.info("Peer %s left topic %s", websocket.remote_address, topic)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the woods broadcast hub")
    parser.add_argument("--host", default=constants.HOST, help="Host interface to bind to")
    parser.add_argument("--port", type=int, default=constants.PORT, help="Port to listen on")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    server = HubServer(args.host, args.port)
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
