import datetime

from sunpos.util.constants import EPOCH_YEAR, HOURS_PER_DAY


def computeDaysSinceEpoch(year: int, dayOfYear: int, hour: float) -> float:
    """Computes the number of days (with fraction) from the J2000.0 epoch, 2000-01-01 12:00 UTC, to the given UTC
    moment. The leap day count is only valid for years 2001 through 2099."""

    delta = year - EPOCH_YEAR
    if delta > 0:
        leapDays = (delta - 1) // 4 + 1
    else:
        leapDays = 0

    return delta * 365 - 0.5 + leapDays + (dayOfYear - 1) + hour / HOURS_PER_DAY


def computePreviousMidnight(days: float) -> float:
    """Returns the day count of the most recent UTC midnight before a day count measured from the J2000.0 epoch.
    Midnight falls half a day past the whole day number since the epoch is defined at noon."""

    # int() truncates toward zero, not toward negative infinity.
    dayNumber = int(days)
    if days - dayNumber < 0.5:
        dayNumber -= 1

    return dayNumber + 0.5


def computeDayOfYear(year: int, month: int, day: int) -> int:
    """Returns the ordinal day of the year (January 1st is 1) for a Gregorian calendar date."""

    if not 1 <= month <= 12:
        raise ValueError(f'month must be between 1 and 12, not {month}')

    n1 = int(275 * month / 9)
    n2 = int((month + 9) / 12)
    n3 = (1 + int((year - 4 * int(year / 4) + 2) / 3))

    return n1 - (n2 * n3) + day - 30


def splitDatetime(date: datetime.datetime) -> (int, int, float):
    """Splits a datetime into the UTC year, day of year and fractional hour. Naive datetimes are treated as UTC."""

    if date.tzinfo is not None:
        date = date.astimezone(datetime.timezone.utc)

    hour = date.hour + date.minute / 60.0 + (date.second + date.microsecond / 1e6) / 3600.0
    return date.year, date.timetuple().tm_yday, hour
