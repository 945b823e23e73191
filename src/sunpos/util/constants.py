from math import pi

# Supported calendar window. The leap day count used for the epoch offset only holds for these years.
MIN_YEAR = 2001
MAX_YEAR = 2099
EPOCH_YEAR = 2000

TWOPI = 2 * pi
DEGREES_PER_HOUR = 15.0
HOURS_PER_DAY = 24.0

# Low order solar ephemeris coefficients (degrees, degrees per day).
MEAN_ANOMALY_EPOCH = 357.529
MEAN_ANOMALY_RATE = 0.98560028
MEAN_LONGITUDE_EPOCH = 280.459
MEAN_LONGITUDE_RATE = 0.9856474
CENTER_TERM_1 = 1.915
CENTER_TERM_2 = 0.020
OBLIQUITY_EPOCH = 23.439
OBLIQUITY_RATE = 0.00000036

# Greenwich mean sidereal time (hours, hours per day, sidereal hours per solar hour).
GMST_EPOCH = 6.697374558
GMST_DAY_RATE = 0.065709824419
SIDEREAL_PER_SOLAR = 1.00273790935

# Refraction bands and coefficients, degrees.
REFRACTION_UPPER_LIMIT = 19.225
REFRACTION_LOWER_LIMIT = -0.766
REFRACTION_SCALE = 3.51823
REFRACTION_HIGH_FACTOR = 0.00452

# Sun center altitude limits in degrees.
SUNRISE_ALTITUDE = -0.8333333333333334  # 50 arc-minutes
CIVIL_TWILIGHT = -6.0
NAUTICAL_TWILIGHT = -12.0
ASTRONOMICAL_TWILIGHT = -18.0

# Below this cosine of elevation the sun is treated as being at the zenith or nadir.
ZENITH_TOLERANCE = 1e-12
