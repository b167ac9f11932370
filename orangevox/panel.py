"""Editor panels and the components drawn inside them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any, Optional

Vec2 = tuple[float, float]

_logger = logging.getLogger(__name__)


class PanelFlags(IntFlag):
    """Window properties of a panel."""

    NONE = 0
    NO_TITLE_BAR = 1 << 0
    NO_RESIZE = 1 << 1
    NO_MOVE = 1 << 2
    NO_COLLAPSE = 1 << 5
    NO_DOCK = 1 << 21


class PanelComponentType(Enum):
    MAIN_VIEWPORT_PANEL = 0
    LOGGER = 1
    SPLINE_EDITOR = 2
    NONE = 3


class PanelComponent(ABC):
    """Something drawn inside a panel."""

    component_type: PanelComponentType = PanelComponentType.NONE

    def __init__(self, parent: Optional["Panel"] = None) -> None:
        self.parent = parent

    @abstractmethod
    def draw(self) -> Any:
        """Produce what this component draws."""


class MainViewportPanel(PanelComponent):
    """Shows the rendered scene texture inside its panel."""

    component_type = PanelComponentType.MAIN_VIEWPORT_PANEL

    def __init__(self, parent: Optional["Panel"] = None) -> None:
        super().__init__(parent)
        self.texture: Any = None
        self.size: Vec2 = (0.0, 0.0)

    def set_texture(self, data: Any, size: Vec2) -> None:
        """Show data, an image of the given size, in the viewport."""
        if data is None:
            _logger.warning("Setting null texture data on main viewport panel!")
        self.texture = data
        self.size = (float(size[0]), float(size[1]))

    def draw(self) -> tuple[Any, Vec2]:
        """The texture to show and the size to show it at."""
        return (self.texture, self.size)


@dataclass(eq=False)
class Panel:
    """A named rectangle of the editor holding components."""

    name: str = ""
    dimensions: Vec2 = (0.0, 0.0)
    pos: Vec2 = (0.0, 0.0)
    flags: PanelFlags = PanelFlags.NONE
    is_open: bool = True
    components: list[PanelComponent] = field(default_factory=list)

    def create(self, name: str, dimensions: Vec2, pos: Vec2, flags: PanelFlags) -> None:
        """Set the panel's name, size, position and flags, and open it."""
        self.name = name
        self.dimensions = (float(dimensions[0]), float(dimensions[1]))
        self.pos = (float(pos[0]), float(pos[1]))
        self.flags = PanelFlags(flags)
        self.is_open = True

    def draw(self) -> list[Any]:
        """Draw every component in order and return what each drew."""
        return [component.draw() for component in self.components]

    def has_component(self, component_type: PanelComponentType) -> bool:
        return any(c.component_type is component_type for c in self.components)

    def add_component(self, component: PanelComponent) -> None:
        self.components.append(component)

    def remove_component(self, component: PanelComponent) -> bool:
        """Remove component; False, with a warning, when the panel does not hold it."""
        before = len(self.components)
        self.components = [c for c in self.components if c is not component]
        if len(self.components) == before:
            _logger.warning("Could not remove panel component")
            return False
        return True

    def get_component(self, component_type: PanelComponentType) -> Optional[PanelComponent]:
        """The first component of the given type, or None."""
        return next(
            (c for c in self.components if c.component_type is component_type), None
        )