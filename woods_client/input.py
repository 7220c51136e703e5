"""Translate local input into commands for the simulation."""

from __future__ import annotations

from typing import Optional, Protocol

import pygame

from .commands import CreateEntity, Point, build_create_entity, encode_command

LEFT_BUTTON = 1


class CommandSink(Protocol):
    def send(self, payload: dict) -> None:
        ...


class InputMapper:
    """Turn left clicks into ``CreateEntity`` commands, one per click."""

    def __init__(self, bridge: CommandSink) -> None:
        self.bridge = bridge

    def pointer_position(self, event: pygame.event.Event) -> Point:
        x, y = event.pos
        return Point(x, y)

    def handle_event(self, event: pygame.event.Event) -> Optional[CreateEntity]:
        if event.type != pygame.MOUSEBUTTONDOWN or getattr(event, "button", None) != LEFT_BUTTON:
            return None
        command = build_create_entity(self.pointer_position(event))
        self.bridge.send(encode_command(command))
        return command
