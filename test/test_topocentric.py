import unittest
from math import sqrt

from pyevspace import Vector

from sunpos.bodies.sun import SunPosition, computeSunPosition
from sunpos.bodies.topocentric import computeSunDirection, computePlaneNormal, computeIncidenceAngle, getAltitude, \
    getAzimuth
from test.close import vectorIsClose


class TestTopocentric(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        # Sun due south, 45 degrees above the horizon.
        cls.position = SunPosition(180.0, 45.0, 0.0, 0.0, 0.0)

    def testSunDirection(self):
        half = sqrt(2) / 2
        direction = computeSunDirection(self.position)
        self.assertTrue(vectorIsClose(direction, Vector(half, 0.0, half)))
        self.assertAlmostEqual(direction.mag(), 1.0)

    def testAltitudeAzimuth(self):
        direction = computeSunDirection(self.position)
        self.assertAlmostEqual(getAltitude(direction), 45.0)
        self.assertAlmostEqual(getAzimuth(direction), 180.0)

        # Vectors don't need to be normalized.
        self.assertAlmostEqual(getAltitude(Vector(0.0, 3.0, 3.0)), 45.0)
        self.assertAlmostEqual(getAzimuth(Vector(0.0, 3.0, 3.0)), 90.0)
        self.assertAlmostEqual(getAzimuth(Vector(0.0, -3.0, 3.0)), 270.0)

    def testPlaneNormal(self):
        self.assertTrue(vectorIsClose(computePlaneNormal(0.0, 123.0), Vector(0.0, 0.0, 1.0)))
        self.assertTrue(vectorIsClose(computePlaneNormal(90.0, 180.0), Vector(1.0, 0.0, 0.0)))
        self.assertTrue(vectorIsClose(computePlaneNormal(90.0, 90.0), Vector(0.0, 1.0, 0.0)))

    def testIncidenceAngle(self):
        # Horizontal plane.
        self.assertAlmostEqual(computeIncidenceAngle(self.position, 0.0, 0.0), 45.0)
        # Vertical plane facing south, east and north.
        self.assertAlmostEqual(computeIncidenceAngle(self.position, 90.0, 180.0), 45.0)
        self.assertAlmostEqual(computeIncidenceAngle(self.position, 90.0, 90.0), 90.0)
        self.assertAlmostEqual(computeIncidenceAngle(self.position, 90.0, 0.0), 135.0)

    def testComputedIncidence(self):
        position = computeSunPosition(2024, 172, 12.0, 40.0, 0.0)
        # A panel facing the noon sun at the latitude tilt minus declination is nearly normal to the sun.
        angle = computeIncidenceAngle(position, 40.0 - 23.44, 180.0)
        self.assertLess(angle, 2.0)


if __name__ == '__main__':
    unittest.main()
