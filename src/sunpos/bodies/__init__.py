from .sun import (
    SunPosition,
    azimuthAngleString,
    computeRefraction,
    computeSunPosition,
    computeSunPositionAt,
    Twilight,
    computeTwilightType,
    isSunUp,
)

from .topocentric import (
    computeSunDirection,
    computePlaneNormal,
    computeIncidenceAngle,
    getAltitude,
    getAzimuth,
)

__all__ = (
    # sun.py
    'SunPosition',
    'azimuthAngleString',
    'computeRefraction',
    'computeSunPosition',
    'computeSunPositionAt',
    'Twilight',
    'computeTwilightType',
    'isSunUp',

    # topocentric.py
    'computeSunDirection',
    'computePlaneNormal',
    'computeIncidenceAngle',
    'getAltitude',
    'getAzimuth',
)
