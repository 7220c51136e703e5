"""Tests for the pygame drawing glue."""

import pygame
import pytest

from woods_client import render
from woods_client.entities import EntityStore
from woods_client.errors import MountError
from woods_client.projection import Shape, project
from woods_client.sync import SnapshotSync


def test_mount_view_failure_is_fatal(monkeypatch) -> None:
    def no_display(size):
        raise pygame.error("No available video device")

    monkeypatch.setattr(render.pygame, "init", lambda: (0, 0))
    monkeypatch.setattr(render.pygame.display, "set_mode", no_display)

    with pytest.raises(MountError):
        render.mount_view((100, 100))


def test_draw_shapes_fills_rectangles() -> None:
    surface = pygame.Surface((40, 40))
    renderer = render.Renderer(surface)

    renderer.clear()
    renderer.draw_shapes([Shape(entity_id=1, x=5, y=6)])

    assert tuple(surface.get_at((7, 8)))[:3] == renderer.shape_color
    assert tuple(surface.get_at((30, 30)))[:3] == renderer.background_color


def test_non_finite_positions_do_not_break_redraw(monkeypatch) -> None:
    surface = pygame.Surface((40, 40))
    renderer = render.Renderer(surface)
    presented = []
    monkeypatch.setattr(renderer, "present", lambda: presented.append(1))
    store = EntityStore()
    store.subscribe(lambda entities: renderer.redraw(project(entities)))

    SnapshotSync(store)(
        '[[1, [{"Body": {"x": 1e400, "y": 6, "z": 0, "sx": 10, "sy": 10, "sz": 10}}]],'
        ' [2, [{"Body": {"x": 5, "y": 6, "z": 0, "sx": 10, "sy": 10, "sz": 10}}]]]'
    )

    assert presented == [1]
    assert [entity.id for entity in store.entities] == [1, 2]
    assert tuple(surface.get_at((7, 8)))[:3] == renderer.shape_color


def test_draw_shapes_skips_nan_shape() -> None:
    surface = pygame.Surface((40, 40))
    renderer = render.Renderer(surface)

    renderer.clear()
    renderer.draw_shapes([Shape(entity_id=1, x=float("nan"), y=0), Shape(entity_id=2, x=20, y=20)])

    assert tuple(surface.get_at((22, 22)))[:3] == renderer.shape_color
