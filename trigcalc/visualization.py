# for type hinting
from typing import Optional

# matrix operations
import numpy as np

# visualisation
from matplotlib import pyplot as plt

# custom angle class for rad / deg handling
from . import Angle

# pole checks and function names
from . import trig_evaluation as trig


def pole_positions(operation: str, angle: Angle.Angle, lower: float, upper: float) -> list[float]:
    """
    lists the poles of the function inside [lower, upper], expressed in the angle's unit

    :param operation: "tangent" or "cotangent"
    :param angle: evaluated angle, defines the unit
    :param lower: lower bound of the window
    :param upper: upper bound of the window
    :return: pole positions in ascending order
    """
    half_turn = angle.half_turn()
    offset = half_turn / 2 if operation == "tangent" else 0.0

    k = int(np.ceil((lower - offset) / half_turn))

    poles = []
    while offset + k * half_turn <= upper:
        poles.append(offset + k * half_turn)
        k += 1

    return poles


def sample_function(operation: str, angle: Angle.Angle, cfg: dict) -> tuple[np.ndarray, np.ndarray]:
    """
    samples the function around the angle; values beyond the y limit are masked so the curve breaks at asymptotes

    :param operation: "tangent" or "cotangent"
    :param angle: evaluated angle
    :param cfg: global config dictionary
    :return: x values in the angle's unit and masked function values
    """
    half_width = cfg["plot_periods"] * angle.half_turn()
    x = np.linspace(angle.value() - half_width, angle.value() + half_width, int(cfg["plot_samples"]))

    x_rad = x if angle.is_radians() else Angle.degrees_to_radians(x)

    with np.errstate(divide="ignore", invalid="ignore"):
        y = np.tan(x_rad)
        if operation == "cotangent":
            y = 1.0 / y

    y[np.abs(y) > cfg["plot_y_limit"]] = np.nan

    return x, y


def plot_evaluation(operation: str, angle: Angle.Angle, result: Optional[float], cfg: dict):
    """
    plots the evaluated function around the angle with its poles and the evaluated point

    :param operation: "tangent" or "cotangent"
    :param angle: evaluated angle
    :param result: function value, None if the angle is a pole
    :param cfg: global config dictionary
    :return: matplotlib figure
    """
    x, y = sample_function(operation, angle, cfg)

    fn = trig.FUNCTION_NAMES[operation]

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(x, y, c="tab:blue", label=f"{fn}(x)")

    for pole in pole_positions(operation, angle, x[0], x[-1]):
        ax.axvline(pole, c="gray", linestyle="--", linewidth=1)

    if result is not None:
        ax.scatter(angle.value(), result, c="red", marker="x", zorder=3,
                   label=f"{fn}({angle.value():g}{angle.suffix()}) = {result:.6f}")
    else:
        ax.axvline(angle.value(), c="red", linestyle="--", linewidth=1, label="undefined")

    ax.set_ylim(-cfg["plot_y_limit"], cfg["plot_y_limit"])
    ax.set_title(f"{operation.capitalize()} around {angle.value():g}{angle.suffix()}")
    ax.set_xlabel("angle [rad]" if angle.is_radians() else "angle [°]")
    ax.set_ylabel(f"{fn}(x)")
    ax.legend(loc="upper left")

    plt.show()

    return fig
