import pytest
from pydantic import ValidationError

from hex_tiles import GridSettings, HexLayout, Orientation


def test_defaults():
    settings = GridSettings()
    assert settings.hex_size == 1.0
    assert settings.orientation is Orientation.FLAT
    assert settings.radius == 3
    assert settings.cell_count == 37


def test_orientation_accepts_any_case():
    assert GridSettings(orientation="POINTY").orientation is Orientation.POINTY


@pytest.mark.parametrize(
    "kwargs",
    [
        {"hex_size": 0.0},
        {"hex_size": -1.0},
        {"radius": -1},
        {"orientation": "diagonal"},
        {"unknown": 1},
    ],
)
def test_invalid_settings_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        GridSettings(**kwargs)


def test_layout_and_grid_follow_settings():
    settings = GridSettings(hex_size=2.5, orientation="pointy", radius=2)
    assert settings.layout() == HexLayout(2.5, Orientation.POINTY)
    graph = settings.build_grid()
    assert graph.number_of_nodes() == settings.cell_count
    assert all("position" in data for _, data in graph.nodes(data=True))
