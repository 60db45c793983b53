import math

import pytest

from hex_tiles import InvalidArgumentError
from hex_tiles.geometry import Orientation, hex_area, hex_height, hex_perimeter, hex_width


def test_area_and_perimeter():
    assert hex_area(1.0) == pytest.approx(3 * math.sqrt(3) / 2)
    assert hex_area(2.0) == pytest.approx(4 * hex_area(1.0))
    assert hex_perimeter(2.0) == 12.0


@pytest.mark.parametrize(
    ("orientation", "width", "height"),
    [
        (Orientation.FLAT, 2.0, math.sqrt(3)),
        (Orientation.POINTY, math.sqrt(3), 2.0),
    ],
)
def test_width_and_height(orientation, width, height):
    assert hex_width(1.0, orientation) == pytest.approx(width)
    assert hex_height(1.0, orientation) == pytest.approx(height)


def test_metrics_reject_non_positive_size():
    for fn in (hex_area, hex_perimeter, hex_width, hex_height):
        with pytest.raises(InvalidArgumentError):
            fn(0.0)
