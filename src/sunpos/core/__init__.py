from .juliandate import (
    computeDaysSinceEpoch,
    computePreviousMidnight,
    computeDayOfYear,
    splitDatetime,
)

from .sidereal import (
    computeMeanSiderealTime,
    computeLocalSiderealTime,
)

__all__ = (
    # juliandate.py
    'computeDaysSinceEpoch',
    'computePreviousMidnight',
    'computeDayOfYear',
    'splitDatetime',

    # sidereal.py
    'computeMeanSiderealTime',
    'computeLocalSiderealTime',
)
