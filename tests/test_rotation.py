import math

import pytest

from xaio.rotation import rotation_to_matrix, rotation_to_transform_matrix


def test_zero_rotation_is_identity():
    assert rotation_to_matrix(0.0) == [1.0, 0.0, 0.0, 1.0]


@pytest.mark.parametrize("degrees", [0.0, 30.0, 90.0, 181.5, -45.0, 360.0])
def test_determinant_is_one(degrees):
    a, b, c, d = rotation_to_matrix(degrees)
    assert a * d - b * c == pytest.approx(1.0)


@pytest.mark.parametrize("degrees", [12.0, 90.0, 270.0])
def test_matches_trigonometry(degrees):
    a, b, c, d = rotation_to_matrix(degrees)
    rad = math.radians(degrees)
    assert a == pytest.approx(math.cos(rad))
    assert c == pytest.approx(math.sin(rad))
    assert b == -c
    assert a == d


@pytest.mark.parametrize("degrees", [0.0, 45.0, 200.0])
def test_transform_matrix_layout(degrees):
    m = rotation_to_matrix(degrees)
    t = rotation_to_transform_matrix(degrees)
    assert len(t) == 6
    assert t[:4] == [m[0], m[2], m[1], m[3]]
    assert t[4:] == [0.0, 0.0]