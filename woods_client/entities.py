"""Client side entity representations mirroring the simulation state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .components import Body, Component

Listener = Callable[[Tuple["Entity", ...]], None]


@dataclass
class Entity:
    """A simulation object rebuilt from every snapshot."""

    id: int
    components: Dict[str, Component] = field(default_factory=dict)

    def set_component(self, component: Component) -> None:
        """Attach ``component``, replacing any earlier one with the same tag."""

        self.components[component.tag] = component

    @property
    def body(self) -> Optional[Body]:
        """The spatial component, if the snapshot carried one."""

        component = self.components.get(Body.tag)
        return component if isinstance(component, Body) else None


class EntityStore:
    """Hold the latest decoded entity list for the renderer.

    The list is swapped wholesale on every :meth:`apply`; nothing from the
    previous snapshot survives. Listeners run synchronously, once per call.
    """

    def __init__(self) -> None:
        self._entities: Tuple[Entity, ...] = ()
        self._listeners: List[Listener] = []

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return self._entities

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply(self, entities: Iterable[Entity]) -> None:
        self._entities = tuple(entities)
        for listener in list(self._listeners):
            listener(self._entities)
