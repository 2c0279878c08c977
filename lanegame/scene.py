"""Base class for scenes run by the game manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

from lanegame.entity import Entity

if TYPE_CHECKING:
    from lanegame.game_manager import GameManager

E = TypeVar("E", bound=Entity)


class Scene(ABC):
    """A scene owns the game rules; entities it creates join the manager's world."""

    def __init__(self, game_manager: Optional["GameManager"] = None) -> None:
        self.game_manager = game_manager

    def _manager(self) -> "GameManager":
        if self.game_manager is None:
            raise RuntimeError("scene is not attached to a game manager")
        return self.game_manager

    def create_entity(self, entity_cls: Type[E], radius: float, color: Any) -> E:
        """Create and initialise an entity; it joins the world after the next update."""
        if not (isinstance(entity_cls, type) and issubclass(entity_cls, Entity)):
            raise TypeError(f"{entity_cls!r} is not an Entity subclass")
        manager = self._manager()
        entity = entity_cls(self)
        entity.initialize(radius, color)
        manager.add_entity(entity)
        return entity

    @property
    def delta_time(self) -> float:
        return self._manager().delta_time

    @property
    def window_width(self) -> int:
        return self._manager().window_width

    @property
    def window_height(self) -> int:
        return self._manager().window_height

    @abstractmethod
    def on_initialize(self) -> None:
        """Set up the scene's entities."""

    @abstractmethod
    def on_event(self, event: Any) -> None:
        """React to an input event."""

    @abstractmethod
    def on_update(self) -> None:
        """Called once per frame before the entities move."""