"""Entry point for the pygame based viewer."""

from __future__ import annotations

import argparse
import asyncio
import logging

import pygame

from . import constants
from .assets import AssetCache
from .entities import EntityStore
from .input import InputMapper
from .network import ChannelBridge
from .projection import project
from .render import Renderer, load_texture, mount_view
from .sync import SnapshotSync


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the woods viewer")
    parser.add_argument("--host", default=constants.HUB_HOST, help="Hub host")
    parser.add_argument("--port", type=int, default=constants.HUB_PORT, help="Hub port")
    parser.add_argument("--topic", default=constants.TOPIC, help="Channel topic shared with the simulation")
    parser.add_argument("--width", type=int, default=constants.WINDOW_WIDTH, help="Window width")
    parser.add_argument("--height", type=int, default=constants.WINDOW_HEIGHT, help="Window height")
    parser.add_argument("--assets", default=constants.ASSETS_DIR, help="Directory holding textures")
    parser.add_argument("--texture", default=None, help="Texture filename used for entities")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


async def run_client(args: argparse.Namespace) -> None:
    screen = mount_view((args.width, args.height))
    try:
        texture = load_texture(AssetCache(args.assets), args.texture) if args.texture else None
        renderer = Renderer(screen, texture)
        clock = pygame.time.Clock()

        store = EntityStore()
        store.subscribe(lambda entities: renderer.redraw(project(entities)))
        renderer.redraw([])

        bridge = ChannelBridge(f"ws://{args.host}:{args.port}", args.topic)
        subscription = bridge.subscribe(SnapshotSync(store))
        await bridge.open()
        input_mapper = InputMapper(bridge)

        async with subscription:
            running = True
            while running:
                clock.tick(constants.FRAME_RATE)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.VIDEOEXPOSE:
                        renderer.redraw(project(store.entities))
                    else:
                        input_mapper.handle_event(event)
                await asyncio.sleep(0)
    finally:
        pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    asyncio.run(run_client(args))


if __name__ == "__main__":
    main()
