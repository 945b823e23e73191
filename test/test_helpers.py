import unittest
from math import pi, inf, nan

from sunpos.exceptions import DomainError
from sunpos.util.helpers import normalizeAngle, reduceHours, wrapHourAngle, safeAsin, atan3


class TestHelpers(unittest.TestCase):

    def testNormalizeAngle(self):
        values = ((0.0, 0.0), (360.0, 0.0), (720.0, 0.0), (-360.0, 0.0), (-90.0, 270.0), (359.5, 359.5),
                  (10000.0, 280.0), (-10000.0, 80.0))
        for angle, answer in values:
            with self.subTest(angle=angle):
                self.assertEqual(normalizeAngle(angle), answer)

    def testNormalizeAnglePeriodic(self):
        for k in range(-5, 6):
            with self.subTest(k=k):
                self.assertEqual(normalizeAngle(45.5 + 360 * k), 45.5)

    def testNormalizeAngleBoundary(self):
        # -1e-20 + 360 rounds to exactly 360.0.
        angle = normalizeAngle(-1e-20)
        self.assertGreaterEqual(angle, 0.0)
        self.assertLess(angle, 360.0)

    def testNormalizeAngleNotFinite(self):
        for value in (inf, -inf, nan):
            with self.subTest(value=value):
                with self.assertRaises(DomainError):
                    normalizeAngle(value)

    def testReduceHours(self):
        self.assertAlmostEqual(reduceHours(25.0), 1.0)
        self.assertAlmostEqual(reduceHours(-1.0), 23.0)
        self.assertEqual(reduceHours(24.0), 0.0)
        self.assertEqual(reduceHours(48.5), 0.5)
        self.assertEqual(reduceHours(-1e-17), 0.0)

    def testWrapHourAngle(self):
        self.assertAlmostEqual(wrapHourAngle(4.0), 4.0 - 2 * pi)
        self.assertAlmostEqual(wrapHourAngle(-4.0), -4.0 + 2 * pi)
        self.assertEqual(wrapHourAngle(1.0), 1.0)
        self.assertEqual(wrapHourAngle(pi), pi)
        self.assertEqual(wrapHourAngle(-pi), -pi)

    def testSafeAsin(self):
        self.assertAlmostEqual(safeAsin(0.5, 'test'), pi / 6)
        self.assertEqual(safeAsin(1.0, 'test'), pi / 2)

        with self.assertRaises(DomainError):
            safeAsin(1.0000001, 'test')
        # DomainError is still a ValueError like the math module raises.
        with self.assertRaises(ValueError):
            safeAsin(-2.0, 'test')

    def test_atan3(self):
        # Just need to focus on testing the signs of each quadrant.
        self.assertAlmostEqual(atan3(1, 1), pi / 4)
        self.assertAlmostEqual(atan3(1, -1), 3 * pi / 4)
        self.assertAlmostEqual(atan3(-1, -1), 5 * pi / 4)
        self.assertAlmostEqual(atan3(-1, 1), 7 * pi / 4)


if __name__ == '__main__':
    unittest.main()
