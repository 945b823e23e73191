import datetime
import json
import logging
from enum import Enum
from math import sin, cos, tan, atan2, radians, degrees, pi

from sunpos.core.juliandate import computeDaysSinceEpoch, computePreviousMidnight, splitDatetime
from sunpos.core.sidereal import computeLocalSiderealTime
from sunpos.exceptions import InputRangeError
from sunpos.util.constants import MIN_YEAR, MAX_YEAR, MEAN_ANOMALY_EPOCH, MEAN_ANOMALY_RATE, \
    MEAN_LONGITUDE_EPOCH, MEAN_LONGITUDE_RATE, CENTER_TERM_1, CENTER_TERM_2, OBLIQUITY_EPOCH, OBLIQUITY_RATE, \
    DEGREES_PER_HOUR, REFRACTION_UPPER_LIMIT, REFRACTION_LOWER_LIMIT, REFRACTION_SCALE, REFRACTION_HIGH_FACTOR, \
    SUNRISE_ALTITUDE, CIVIL_TWILIGHT, NAUTICAL_TWILIGHT, ASTRONOMICAL_TWILIGHT, ZENITH_TOLERANCE
from sunpos.util.helpers import normalizeAngle, wrapHourAngle, safeAsin

logger = logging.getLogger(__name__)


def azimuthAngleString(azimuth: float) -> str:
    """Converts an azimuth angle in degrees to a 16 point compass direction string."""

    if azimuth > 348.75 or azimuth <= 11.25:
        return 'N'
    elif azimuth <= 33.75:
        return 'NNE'
    elif azimuth <= 56.25:
        return 'NE'
    elif azimuth <= 78.75:
        return 'ENE'
    elif azimuth <= 101.25:
        return 'E'
    elif azimuth <= 123.75:
        return 'ESE'
    elif azimuth <= 146.25:
        return 'SE'
    elif azimuth <= 168.75:
        return 'SSE'
    elif azimuth <= 191.25:
        return 'S'
    elif azimuth <= 213.75:
        return 'SSW'
    elif azimuth <= 236.25:
        return 'SW'
    elif azimuth <= 258.75:
        return 'WSW'
    elif azimuth <= 281.25:
        return 'W'
    elif azimuth <= 303.75:
        return 'WNW'
    elif azimuth <= 326.25:
        return 'NW'
    else:
        return 'NNW'


class SunPosition:
    """The apparent position of the sun for an observer. All angles are in degrees: azimuth is measured clockwise
    from north in [0, 360), elevation includes atmospheric refraction, hour angle is positive west of the meridian
    in [-180, 180], and right ascension is in [0, 360). Unpacks in that order along with declination:

    >>> azimuth, elevation, hourAngle, declination, rightAscension = computeSunPosition(2024, 172, 12.0, 40.0, 0.0)
    """

    __slots__ = '_azimuth', '_elevation', '_hourAngle', '_declination', '_rightAscension'

    def __init__(self, azimuth: float, elevation: float, hourAngle: float, declination: float,
                 rightAscension: float):
        self._azimuth = azimuth
        self._elevation = elevation
        self._hourAngle = hourAngle
        self._declination = declination
        self._rightAscension = rightAscension

    def __str__(self) -> str:
        return f'azimuth: {self._azimuth}, elevation: {self._elevation}, hour-angle: {self._hourAngle}, ' \
               f'declination: {self._declination}, right-ascension: {self._rightAscension}'

    def __repr__(self) -> str:
        return f'SunPosition({self._azimuth}, {self._elevation}, {self._hourAngle}, {self._declination}, ' \
               f'{self._rightAscension})'

    def __iter__(self):
        return iter((self._azimuth, self._elevation, self._hourAngle, self._declination, self._rightAscension))

    def __eq__(self, other: 'SunPosition') -> bool:
        if isinstance(other, SunPosition):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    def __reduce__(self):
        return self.__class__, tuple(self)

    def toDict(self) -> dict:
        return {"azimuth": self._azimuth, "elevation": self._elevation, "hour-angle": self._hourAngle,
                "declination": self._declination, "right-ascension": self._rightAscension}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    # read-only properties
    @property
    def azimuth(self) -> float:
        return self._azimuth

    @property
    def elevation(self) -> float:
        return self._elevation

    @property
    def hourAngle(self) -> float:
        return self._hourAngle

    @property
    def declination(self) -> float:
        return self._declination

    @property
    def rightAscension(self) -> float:
        return self._rightAscension

    @property
    def azimuthRadians(self) -> float:
        return radians(self._azimuth)

    @property
    def elevationRadians(self) -> float:
        return radians(self._elevation)

    @property
    def hourAngleRadians(self) -> float:
        return radians(self._hourAngle)

    @property
    def declinationRadians(self) -> float:
        return radians(self._declination)

    @property
    def rightAscensionRadians(self) -> float:
        return radians(self._rightAscension)

    @property
    def rightAscensionHours(self) -> float:
        return self._rightAscension / DEGREES_PER_HOUR

    @property
    def direction(self) -> str:
        return azimuthAngleString(self._azimuth)


def computeRefraction(elevation: float) -> float:
    """Computes the atmospheric refraction correction in degrees for a geometric elevation in degrees. The
    correction is zero at or below -0.766 degrees."""

    if elevation >= REFRACTION_UPPER_LIMIT:
        return REFRACTION_HIGH_FACTOR * REFRACTION_SCALE / tan(radians(elevation))
    elif elevation > REFRACTION_LOWER_LIMIT:
        numerator = 0.1594 + 0.0196 * elevation + 0.00002 * elevation * elevation
        denominator = 1 + 0.505 * elevation + 0.0845 * elevation * elevation
        return REFRACTION_SCALE * numerator / denominator
    return 0.0


def _computeAzimuth(declination: float, latitude: float, hourAngle: float, elevation: float) -> float:
    # Returns the azimuth in radians, all arguments in radians. Not normalized.

    cosElevation = cos(elevation)
    if abs(cosElevation) < ZENITH_TOLERANCE:
        # Azimuth is undefined with the sun at the zenith or nadir.
        return 0.0

    azimuth = safeAsin(-cos(declination) * sin(hourAngle) / cosElevation, 'azimuth')
    # The arcsine only covers the eastern and western quarters, move to the other side of the prime vertical.
    if sin(declination) - sin(elevation) * sin(latitude) < 0:
        azimuth = pi - azimuth

    return azimuth


def computeSunPosition(year: int, dayOfYear: int, hour: float, latitude: float, longitude: float) -> SunPosition:
    """Computes the apparent position of the sun for a UTC moment and a geographic location.

    Parameters:
        year: Calendar year, 2001 through 2099.
        dayOfYear: Ordinal day of the year, 1 through 366.
        hour: UTC time of day in hours.
        latitude: Geodetic latitude in degrees, north positive.
        longitude: Longitude in degrees, east positive.

    Raises InputRangeError if the year is outside the supported window and DomainError if an inverse trigonometric
    function is given an argument outside its domain."""

    if not MIN_YEAR <= year <= MAX_YEAR:
        logger.debug('rejecting year %s outside [%s, %s]', year, MIN_YEAR, MAX_YEAR)
        raise InputRangeError(f'year must be between {MIN_YEAR} and {MAX_YEAR}, not {year}')

    logger.debug('computing sun position for %s day %s hour %s at (%s, %s)', year, dayOfYear, hour, latitude,
                 longitude)
    latitudeRadians = radians(latitude)

    days = computeDaysSinceEpoch(year, dayOfYear, hour)
    midnightDays = computePreviousMidnight(days)

    # Ecliptic coordinates.
    meanAnomalyRadians = radians(normalizeAngle(MEAN_ANOMALY_EPOCH + MEAN_ANOMALY_RATE * days))
    meanLongitudeDegrees = normalizeAngle(MEAN_LONGITUDE_EPOCH + MEAN_LONGITUDE_RATE * days)
    eclipticLongitudeDegrees = normalizeAngle(meanLongitudeDegrees
                                              + CENTER_TERM_1 * sin(meanAnomalyRadians)
                                              + CENTER_TERM_2 * sin(2 * meanAnomalyRadians))
    eclipticLongitudeRadians = radians(eclipticLongitudeDegrees)
    obliquityRadians = radians(OBLIQUITY_EPOCH - OBLIQUITY_RATE * days)

    # Celestial coordinates.
    rightAscensionRadians = atan2(cos(obliquityRadians) * sin(eclipticLongitudeRadians),
                                  cos(eclipticLongitudeRadians))
    declinationRadians = safeAsin(sin(obliquityRadians) * sin(eclipticLongitudeRadians), 'declination')

    # Local coordinates.
    localSiderealHours = computeLocalSiderealTime(midnightDays, hour, longitude)
    localSiderealRadians = radians(localSiderealHours * DEGREES_PER_HOUR)

    hourAngleRadians = wrapHourAngle(localSiderealRadians - rightAscensionRadians)

    elevationRadians = safeAsin(sin(declinationRadians) * sin(latitudeRadians)
                                + cos(declinationRadians) * cos(latitudeRadians) * cos(hourAngleRadians),
                                'elevation')
    azimuthRadians = _computeAzimuth(declinationRadians, latitudeRadians, hourAngleRadians, elevationRadians)

    elevationDegrees = degrees(elevationRadians)
    elevationDegrees += computeRefraction(elevationDegrees)

    position = SunPosition(normalizeAngle(degrees(azimuthRadians)),
                           elevationDegrees,
                           degrees(hourAngleRadians),
                           degrees(declinationRadians),
                           normalizeAngle(degrees(rightAscensionRadians)))
    logger.debug('computed %r', position)

    return position


def computeSunPositionAt(date: datetime.datetime, latitude: float, longitude: float) -> SunPosition:
    """Computes the apparent position of the sun at a datetime. Naive datetimes are treated as UTC."""

    year, dayOfYear, hour = splitDatetime(date)
    return computeSunPosition(year, dayOfYear, hour, latitude, longitude)


class Twilight(Enum):
    Day = 0
    Civil = 1
    Nautical = 2
    Astronomical = 3
    Night = 4


def computeTwilightType(position: SunPosition) -> Twilight:
    elevation = position.elevation

    if elevation < ASTRONOMICAL_TWILIGHT:
        return Twilight.Night
    elif elevation < NAUTICAL_TWILIGHT:
        return Twilight.Astronomical
    elif elevation < CIVIL_TWILIGHT:
        return Twilight.Nautical
    elif elevation < SUNRISE_ALTITUDE:
        return Twilight.Civil
    else:
        return Twilight.Day


def isSunUp(position: SunPosition) -> bool:
    # Refraction is zero below -0.766 degrees, so this compares the same as a geometric elevation would.
    return position.elevation >= SUNRISE_ALTITUDE
