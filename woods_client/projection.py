"""Turn the current entity list into drawable shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from . import constants
from .components import Body
from .entities import Entity

Projection = Callable[[Body], Tuple[float, float]]


@dataclass(frozen=True)
class Shape:
    """A lightweight rectangle used purely for drawing."""

    entity_id: int
    x: float
    y: float
    width: int = constants.SHAPE_SIZE
    height: int = constants.SHAPE_SIZE


def planar_projection(body: Body) -> Tuple[float, float]:
    """Currently a passthrough projection that drops depth.

    No camera or scale is applied; swap in another :data:`Projection` once
    the view needs one.
    """

    return body.x, body.y


def project(entities: Iterable[Entity], projection: Projection = planar_projection) -> List[Shape]:
    shapes: List[Shape] = []
    for entity in entities:
        body = entity.body
        if body is None:
            continue
        x, y = projection(body)
        shapes.append(Shape(entity_id=entity.id, x=x, y=y))
    return shapes
