"""Commands sent from the viewer back into the simulation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Dict, Type

from . import constants
from .errors import DecodeError


@dataclass(frozen=True)
class Point:
    """A two dimensional point in page space."""

    x: float
    y: float


class Command:
    """Base class for tagged commands."""

    tag: ClassVar[str]


@dataclass(frozen=True)
class CreateEntity(Command):
    """Ask the simulation to spawn an entity with the given body."""

    tag: ClassVar[str] = "CreateEntity"

    x: float
    y: float
    z: float
    sx: float
    sy: float
    sz: float


_commands: Dict[str, Type[Command]] = {CreateEntity.tag: CreateEntity}


def build_create_entity(point: Point) -> CreateEntity:
    """Return the create command for a click at ``point``.

    Depth and scale are fixed; only the planar position comes from input.
    """

    sx, sy, sz = constants.CREATE_SCALE
    return CreateEntity(x=point.x, y=point.y, z=constants.CREATE_Z, sx=sx, sy=sy, sz=sz)


def encode_command(command: Command) -> dict:
    """Serialise ``command`` to its tagged JSON friendly form."""

    return {command.tag: asdict(command)}


def decode_command(payload: Any) -> Command:
    """Parse a tagged command object as the simulation worker receives it."""

    if not isinstance(payload, dict) or len(payload) != 1:
        raise DecodeError("Command must be an object with exactly one tag")
    (tag, data), = payload.items()
    command_cls = _commands.get(tag)
    if command_cls is None:
        raise DecodeError(f"Unknown command {tag!r}")
    if not isinstance(data, dict):
        raise DecodeError(f"{tag} payload must be an object")
    try:
        return command_cls(**{item.name: data[item.name] for item in fields(command_cls)})
    except KeyError as exc:
        raise DecodeError(f"{tag} payload missing field {exc.args[0]!r}") from exc
