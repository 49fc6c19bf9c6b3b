# for type hinting
from typing import Union

# trigonometry
import math

# custom angle class for rad / deg handling
from . import Angle


# distance to a pole below which an angle counts as undefined
TOLERANCE: float = 1e-10

OPERATIONS = ("tangent", "cotangent")

# short function names used in result lines
FUNCTION_NAMES = {
    "tangent": "tan",
    "cotangent": "cot",
}

# periodic families of excluded angles, phrased per input unit
_POLE_FAMILIES = {
    ("tangent", "rad"): "π/2 + π·k",
    ("tangent", "deg"): "90° + 180°·k",
    ("cotangent", "rad"): "π·k",
    ("cotangent", "deg"): "180°·k",
}

_UNIT_NAMES = {
    "rad": "radians",
    "deg": "degrees",
}


class DomainError(object):
    """
    Result variant returned instead of a number when the angle hits a pole of the requested function
    """
    def __init__(self, operation: str, angle: float, unit: str):
        self.operation: str = operation
        self.angle: float = angle
        self.unit: str = unit
        self.family: str = _POLE_FAMILIES[(operation, unit)]

    def message(self) -> str:
        """
        human readable diagnostic; angle and excluded family are both given in the unit the caller supplied

        :return: diagnostic text
        """
        return (f"{self.operation.capitalize()} is undefined for angle {self.angle:f} "
                f"{_UNIT_NAMES[self.unit]} ({self.family})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return (self.operation, self.angle, self.unit) == (other.operation, other.angle, other.unit)

    def __repr__(self) -> str:
        return f"DomainError(operation={self.operation!r}, angle={self.angle!r}, unit={self.unit!r})"

    def __str__(self) -> str:
        return self.message()


Result = Union[float, DomainError]


def is_tangent_undefined(angle_rad: float) -> bool:
    """
    checks whether the angle lies on a pole of the tangent (π/2 + π·k)
    fmod keeps the sign of the dividend, negative angles land near -π/2 instead of +π/2

    :param angle_rad: angle in radians
    :return: True if tangent is undefined
    """
    normalized = math.fmod(angle_rad, Angle.PI)
    return abs(normalized - Angle.PI / 2) < TOLERANCE or abs(normalized + Angle.PI / 2) < TOLERANCE


def is_cotangent_undefined(angle_rad: float) -> bool:
    """
    checks whether the angle lies on a pole of the cotangent (π·k)

    :param angle_rad: angle in radians
    :return: True if cotangent is undefined
    """
    normalized = math.fmod(angle_rad, Angle.PI)
    return abs(normalized) < TOLERANCE


def tangent(angle: Angle.Angle) -> Result:
    if is_tangent_undefined(angle.rad()):
        return DomainError("tangent", angle.value(), angle.unit())

    return math.tan(angle.rad())


def cotangent(angle: Angle.Angle) -> Result:
    if is_cotangent_undefined(angle.rad()):
        return DomainError("cotangent", angle.value(), angle.unit())

    return 1.0 / math.tan(angle.rad())


_EVALUATORS = {
    "tangent": tangent,
    "cotangent": cotangent,
}


def evaluate(operation: str, angle: float, unit: str = "deg") -> Result:
    """
    evaluates tangent or cotangent of a single angle

    :param operation: "tangent" or "cotangent"
    :param angle: angle value in the given unit
    :param unit: "deg" or "rad"
    :return: function value or DomainError if the angle is a pole
    """
    if operation not in _EVALUATORS:
        raise ValueError(f"Unknown operation '{operation}'! Only {' or '.join(OPERATIONS)} available.")

    return _EVALUATORS[operation](Angle.Angle(angle, unit))
