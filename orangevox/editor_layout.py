"""Layout of the editor's four panels around the main viewport."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional

from orangevox.panel import MainViewportPanel, Panel, PanelFlags

Vec2 = tuple[float, float]

SIDE_PANEL_WIDTH = 200.0
TOP_FRACTION = 0.8
BOTTOM_FRACTION = 0.2


class PanelLocation(IntEnum):
    BOTTOM = 0
    LEFT = 1
    RIGHT = 2
    CENTER = 3


class EditorLayer:
    """Creates and holds the left, right, bottom and centre panels of the editor."""

    def __init__(self) -> None:
        self._panels: dict[PanelLocation, Panel] = {}

    def initialize(self, window_size: Vec2, window_pos: Vec2) -> None:
        """Lay the panels out over a window of window_size placed at window_pos."""
        width, height = float(window_size[0]), float(window_size[1])
        wx, wy = float(window_pos[0]), float(window_pos[1])
        flags = PanelFlags.NO_COLLAPSE | PanelFlags.NO_TITLE_BAR

        left_size = (SIDE_PANEL_WIDTH, height * TOP_FRACTION)
        left = Panel()
        left.create("LeftPanel", left_size, (wx, wy), flags)

        right_size = (SIDE_PANEL_WIDTH, height * TOP_FRACTION)
        right = Panel()
        right.create("RightPanel", right_size, (wx + width - right_size[0], wy), flags)

        bottom_size = (width, float(math.ceil(height * BOTTOM_FRACTION)))
        bottom = Panel()
        bottom.create("BottomPanel", bottom_size, (wx, wy + height * TOP_FRACTION), flags)

        center_size = (width - left_size[0] - right_size[0], height - bottom_size[1])
        center = Panel()
        center.create("MainViewportPanel", center_size, (wx + left_size[0], wy), flags)
        center.add_component(MainViewportPanel(center))

        self._panels = {
            PanelLocation.LEFT: left,
            PanelLocation.RIGHT: right,
            PanelLocation.BOTTOM: bottom,
            PanelLocation.CENTER: center,
        }

    def get_panel(self, location: PanelLocation) -> Optional[Panel]:
        """The panel at location, or None before initialisation."""
        return self._panels.get(PanelLocation(location))

    def shutdown(self) -> None:
        """Drop every panel."""
        self._panels.clear()