from math import asin, atan2, isfinite, pi, fmod

from sunpos.exceptions import DomainError
from sunpos.util.constants import TWOPI, HOURS_PER_DAY


def normalizeAngle(angle: float) -> float:
    """Reduces an angle in degrees to the range [0, 360) by stepping whole turns."""

    if not isfinite(angle):
        raise DomainError(f'angle must be finite, not {angle}')

    # Both bounds are re-checked, adding 360 to a tiny negative value can round to exactly 360.
    while angle < 0.0 or angle >= 360.0:
        if angle < 0.0:
            angle += 360.0
        else:
            angle -= 360.0

    return angle


def reduceHours(hours: float) -> float:
    """Reduces a time in hours to the range [0, 24)."""

    rtn = fmod(hours, HOURS_PER_DAY)
    if rtn < 0:
        rtn += HOURS_PER_DAY
    # fmod of a tiny negative value plus 24 can round up to 24.
    return 0.0 if rtn >= HOURS_PER_DAY else rtn


def wrapHourAngle(angle: float) -> float:
    # Single turn adjustment only, angle is expected within one turn of [-π, π].

    if angle < -pi:
        return angle + TWOPI
    elif angle > pi:
        return angle - TWOPI
    return angle


def safeAsin(value: float, name: str) -> float:
    """Arcsine that raises a DomainError naming the quantity being computed."""

    try:
        return asin(value)
    except ValueError as e:
        raise DomainError(f'{name} arcsine argument out of range: {value}') from e


def atan3(y: float, x: float) -> float:
    """A makeshift version of the atan2 method, where the return value is between 0 and 2π."""

    angle = atan2(y, x)

    if y < 0:
        return angle + TWOPI
    return angle
