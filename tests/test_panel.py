import pytest

from orangevox.panel import (
    MainViewportPanel,
    Panel,
    PanelComponent,
    PanelComponentType,
    PanelFlags,
)


def make_panel():
    panel = Panel()
    panel.create("TestPanel", (300, 200), (10, 20), PanelFlags.NO_COLLAPSE | PanelFlags.NO_TITLE_BAR)
    return panel


def test_create_sets_fields():
    panel = make_panel()
    assert panel.name == "TestPanel"
    assert panel.dimensions == (300.0, 200.0)
    assert panel.pos == (10.0, 20.0)
    assert PanelFlags.NO_COLLAPSE in panel.flags
    assert PanelFlags.NO_MOVE not in panel.flags
    assert panel.is_open is True


def test_create_reopens_closed_panel():
    panel = make_panel()
    panel.is_open = False
    panel.create("Again", (1, 1), (0, 0), PanelFlags.NONE)
    assert panel.is_open is True
    assert panel.name == "Again"


def test_component_base_is_abstract():
    with pytest.raises(TypeError):
        PanelComponent()


def test_add_and_get_component():
    panel = make_panel()
    assert panel.has_component(PanelComponentType.MAIN_VIEWPORT_PANEL) is False
    component = MainViewportPanel(panel)
    panel.add_component(component)
    assert panel.has_component(PanelComponentType.MAIN_VIEWPORT_PANEL) is True
    assert panel.get_component(PanelComponentType.MAIN_VIEWPORT_PANEL) is component
    assert panel.get_component(PanelComponentType.LOGGER) is None
    assert component.parent is panel


def test_remove_component():
    panel = make_panel()
    component = MainViewportPanel(panel)
    panel.add_component(component)
    assert panel.remove_component(component) is True
    assert panel.components == []
    assert panel.has_component(PanelComponentType.MAIN_VIEWPORT_PANEL) is False


def test_remove_missing_component_returns_false():
    panel = make_panel()
    assert panel.remove_component(MainViewportPanel(panel)) is False


def test_viewport_texture_and_draw():
    panel = make_panel()
    component = MainViewportPanel(panel)
    texture = object()
    component.set_texture(texture, (640, 480))
    panel.add_component(component)
    drawn = panel.draw()
    assert drawn == [(texture, (640.0, 480.0))]


def test_set_null_texture_warns(caplog):
    component = MainViewportPanel()
    with caplog.at_level("WARNING"):
        component.set_texture(None, (1, 1))
    assert component.texture is None
    assert "null texture" in caplog.text


def test_empty_panel_draws_nothing():
    assert make_panel().draw() == []