"""Compute the apparent position of the sun from a date, time and location.

This package computes the azimuth, elevation, hour angle, declination and right ascension of the sun using a low order
approximation of the solar ephemeris, good to about one arc-minute for the years 2001 through 2099. That is plenty for
orienting a sundial or a solar panel, or for estimating when the sun is up, but not for precise astronomical work.

Usage
_____

The simplest entry point is `computeSunPosition()` which takes the year, the day of the year, the UTC time in hours and
the observer's latitude and longitude in degrees (north and east positive).

>>> from sunpos import computeSunPosition
>>>
>>> position = computeSunPosition(2024, 172, 18.5, 39.742476, -105.1786)
>>> azimuth, elevation, hourAngle, declination, rightAscension = position

The returned `SunPosition` can be unpacked as above, or its angles read by name. All angles are in degrees; radian
versions are available through the `...Radians` properties. A `datetime` can be used instead of calendar components
with `computeSunPositionAt()`, naive datetimes being treated as UTC.

Years outside 2001 through 2099 raise an `InputRangeError`, and numerical failures in the inverse trigonometric
functions raise a `DomainError`. Both derive from `SunposException`, so a result is either complete or not returned
at all.

Solar panels
------------

The `computeIncidenceAngle()` method gives the angle between the sun and the normal of a tilted plane, computed with
vectors in the topocentric south-east-zenith reference frame.

>>> from sunpos import computeIncidenceAngle
>>>
>>> angle = computeIncidenceAngle(position, 30.0, 180.0) # panel tilted 30 degrees, facing south
"""

import logging

__all__ = []

# import modules
from .exceptions import *
__all__ += exceptions.__all__

# import subpackages
from .util import *
__all__ += util.__all__
from .core import *
__all__ += core.__all__
from .bodies import *
__all__ += bodies.__all__

logging.getLogger(__name__).addHandler(logging.NullHandler())
