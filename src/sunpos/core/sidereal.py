from sunpos.util.constants import GMST_EPOCH, GMST_DAY_RATE, SIDEREAL_PER_SOLAR, DEGREES_PER_HOUR
from sunpos.util.helpers import reduceHours


def computeMeanSiderealTime(midnightDays: float, hour: float) -> float:
    """Computes the Greenwich mean sidereal time in hours. midnightDays is the day count of the preceding UTC
    midnight relative to the J2000.0 epoch and hour is the UTC time of day in hours."""

    gmst = GMST_EPOCH + GMST_DAY_RATE * midnightDays + SIDEREAL_PER_SOLAR * hour
    return reduceHours(gmst)


def computeLocalSiderealTime(midnightDays: float, hour: float, longitude: float) -> float:
    """Computes the local mean sidereal time in hours for a longitude in degrees, east positive."""

    gmst = computeMeanSiderealTime(midnightDays, hour)
    return reduceHours(gmst + longitude / DEGREES_PER_HOUR)
