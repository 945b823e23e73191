from math import sin, cos, radians, degrees

from pyevspace import Vector, vang

from sunpos.util.helpers import atan3, safeAsin

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from sunpos.bodies.sun import SunPosition


def _computeSezVector(altitude: float, azimuth: float) -> Vector:
    """Unit vector in the south-east-zenith frame for an altitude and azimuth in radians, azimuth measured clockwise
    from north."""

    horizontal = cos(altitude)
    return Vector(-horizontal * cos(azimuth), horizontal * sin(azimuth), sin(altitude))


def computeSunDirection(position: 'SunPosition') -> Vector:
    """Returns the unit vector pointing at the sun in the topocentric (SEZ) reference frame."""

    return _computeSezVector(position.elevationRadians, position.azimuthRadians)


def computePlaneNormal(tilt: float, azimuth: float) -> Vector:
    """Returns the unit normal, in the topocentric (SEZ) reference frame, of a plane tilted from horizontal by tilt
    degrees and facing azimuth degrees clockwise from north."""

    # A plane tilted by tilt has its normal tilt degrees away from the zenith.
    return _computeSezVector(radians(90.0 - tilt), radians(azimuth))


def computeIncidenceAngle(position: 'SunPosition', tilt: float, azimuth: float) -> float:
    """Returns the angle in degrees between the sun direction and the normal of a plane, such as a solar panel,
    tilted tilt degrees from horizontal and facing azimuth degrees. Angles above 90 mean the sun is behind the
    plane."""

    sunVector = computeSunDirection(position)
    normal = computePlaneNormal(tilt, azimuth)

    return degrees(vang(sunVector, normal))


def getAltitude(vector: Vector) -> float:
    """Returns the altitude in degrees of a topocentric (SEZ) vector."""

    return degrees(safeAsin(vector[2] / vector.mag(), 'altitude'))


def getAzimuth(vector: Vector) -> float:
    """Returns the azimuth in degrees of a topocentric (SEZ) vector."""

    return degrees(atan3(vector[1], -vector[0]))
