import pytest

from hex_tiles.geometry import Cube, round_cube


def test_round_cube_corrects_largest_error():
    # errors 0.4 / 0.3 / 0.1, so x is recomputed
    assert round_cube(0.6, 0.3, -0.9) == Cube(1, 0, -1)


def test_round_cube_exact_input_is_unchanged():
    assert round_cube(3.0, -5.0, 2.0) == Cube(3, -5, 2)


def test_round_cube_x_tie_defers_to_y():
    # x and y errors are both 0.5; x is not strictly largest so y is recomputed
    assert round_cube(1.5, -0.5, -1.0) == Cube(2, -1, -1)


def test_round_cube_y_z_tie_corrects_z():
    assert round_cube(-1.0, 1.5, -0.5) == Cube(-1, 2, -1)


@pytest.mark.parametrize(
    ("q", "r"),
    [(0.1, 0.2), (-2.7, 1.4), (3.49, -3.51), (0.33, 0.33), (-0.5, 0.25)],
)
def test_round_cube_always_valid_and_near(q: float, r: float):
    s = -q - r
    c = round_cube(q, r, s)
    assert c.x + c.y + c.z == 0
    assert max(abs(c.x - q), abs(c.y - r), abs(c.z - s)) <= 1.0
