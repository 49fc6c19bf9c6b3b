import math

import pytest

from trigcalc import Angle


def test_degrees_to_radians_zero():
    assert Angle.degrees_to_radians(0) == 0


def test_degrees_to_radians_half_turn():
    assert Angle.degrees_to_radians(180) == pytest.approx(Angle.PI)


def test_conversion_constant_matches_pi():
    assert Angle.PI == pytest.approx(math.pi, abs=1e-15)


def test_degree_angle_keeps_original_value():
    angle = Angle.Angle(90)

    assert angle.value() == 90
    assert angle.unit() == "deg"
    assert angle.rad() == Angle.PI / 2
    assert angle.suffix() == "°"
    assert angle.half_turn() == 180.0


def test_radian_angle_is_used_as_is():
    angle = Angle.Angle(0.785, unit="rad")

    assert angle.rad() == 0.785
    assert angle.is_radians()
    assert angle.suffix() == " rad"
    assert angle.half_turn() == Angle.PI


def test_unknown_unit_raises():
    with pytest.raises(ValueError, match="Unknown angle unit"):
        Angle.Angle(10, unit="grad")
