# fixed conversion constant, shared by every unit conversion
PI: float = 3.14159265358979323846

UNITS = ("deg", "rad")


def degrees_to_radians(degrees: float) -> float:
    return degrees * PI / 180.0


class Angle(object):
    """
    This class stores an angle as supplied by the user together with its unit.
    The radian equivalent is derived once, always through degrees_to_radians
    """
    def __init__(self, angle: float, unit: str = "deg"):
        self._value: float = angle
        self._unit: str = unit

        if unit == "deg":
            self._rad: float = degrees_to_radians(angle)
        elif unit == "rad":
            self._rad: float = angle
        else:
            raise ValueError(f"Unknown angle unit name '{unit}'! Only deg or rad available.")

    def value(self) -> float:
        return self._value

    def unit(self) -> str:
        return self._unit

    def rad(self) -> float:
        return self._rad

    def is_radians(self) -> bool:
        return self._unit == "rad"

    def suffix(self) -> str:
        """
        unit suffix appended to the angle in result lines

        :return: " rad" for radians, "°" for degrees
        """
        return " rad" if self.is_radians() else "°"

    def half_turn(self) -> float:
        """
        period of tangent and cotangent expressed in this angle's unit
        """
        return PI if self.is_radians() else 180.0
