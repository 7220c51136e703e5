"""Component variants carried by snapshot entities.

Every variant registers itself under the tag that names it on the wire,
``{"<Tag>": {...fields}}``. The snapshot decoder only talks to the
registry, so adding a variant means adding one class here.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Dict, Optional, Type

from .errors import DecodeError

_registry: Dict[str, Type["Component"]] = {}


class Component:
    """Base class for a typed fragment of entity state."""

    tag: ClassVar[str]

    @classmethod
    def from_payload(cls, data: Any) -> "Component":
        """Build the component from the body of its tagged wire object."""

        if not isinstance(data, dict):
            raise DecodeError(f"{cls.tag} payload must be an object")
        values = {}
        for item in fields(cls):
            if item.name not in data:
                raise DecodeError(f"{cls.tag} payload missing field {item.name!r}")
            values[item.name] = data[item.name]
        return cls(**values)

    def to_payload(self) -> dict:
        """Return the tagged wire object for this component."""

        return {self.tag: asdict(self)}


def register_component(cls: Type[Component]) -> Type[Component]:
    """Class decorator adding ``cls`` to the tag registry."""

    _registry[cls.tag] = cls
    return cls


def component_for_tag(tag: str) -> Optional[Type[Component]]:
    """Return the class registered for ``tag`` or ``None`` if it is unknown."""

    return _registry.get(tag)


@register_component
@dataclass(frozen=True)
class Body(Component):
    """Position and scale of an entity in world space."""

    tag: ClassVar[str] = "Body"

    x: float
    y: float
    z: float
    sx: float
    sy: float
    sz: float
