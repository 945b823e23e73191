from .constants import (
    MIN_YEAR,
    MAX_YEAR,
    EPOCH_YEAR,
    TWOPI,
    DEGREES_PER_HOUR,
    HOURS_PER_DAY,
    SUNRISE_ALTITUDE,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    ASTRONOMICAL_TWILIGHT,
)

from .helpers import (
    normalizeAngle,
    reduceHours,
    wrapHourAngle,
    safeAsin,
    atan3,
)

__all__ = (
    # constants.py
    'MIN_YEAR',
    'MAX_YEAR',
    'EPOCH_YEAR',
    'TWOPI',
    'DEGREES_PER_HOUR',
    'HOURS_PER_DAY',
    'SUNRISE_ALTITUDE',
    'CIVIL_TWILIGHT',
    'NAUTICAL_TWILIGHT',
    'ASTRONOMICAL_TWILIGHT',

    # helpers.py
    'normalizeAngle',
    'reduceHours',
    'wrapHourAngle',
    'safeAsin',
    'atan3',
)
