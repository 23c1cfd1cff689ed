import unittest

from spotit import (
    INF,
    Point,
    ConfigurationError,
    check_order,
    enumerate_points,
    is_prime,
    plane_size,
    point_at,
    point_index,
)


class TestPoints(unittest.TestCase):
    def test_given_orders_when_sizing_plane_then_q2_plus_q_plus_1(self):
        self.assertEqual(plane_size(2), 7)
        self.assertEqual(plane_size(3), 13)
        self.assertEqual(plane_size(7), 57)

    def test_given_enumeration_when_indexing_then_closed_form_matches_position(self):
        for q in (2, 3, 5, 7):
            pts = list(enumerate_points(q))
            self.assertEqual(len(pts), plane_size(q))
            self.assertEqual(len(set(pts)), plane_size(q))
            for i, p in enumerate(pts):
                self.assertEqual(point_index(p, q), i)
                self.assertEqual(point_at(i, q), p)

    def test_given_point_kinds_when_indexing_then_expected_offsets(self):
        q = 7
        self.assertEqual(point_index(Point(2, 3), q), 17)
        self.assertEqual(point_index(Point(4, INF), q), 53)
        self.assertEqual(point_index(Point(INF, INF), q), 56)
        self.assertEqual(Point(2, 3).kind, 'affine')
        self.assertEqual(Point(4, INF).kind, 'slope')
        self.assertEqual(Point(INF, INF).kind, 'infinity')
        self.assertEqual(Point(4, INF).pretty(), '(4,inf)')

    def test_given_bad_points_when_indexing_then_value_error(self):
        with self.assertRaises(ValueError):
            point_index(Point(INF, 1), 3)
        with self.assertRaises(ValueError):
            point_index(Point(3, 0), 3)
        with self.assertRaises(ValueError):
            point_index(Point(0, 5), 3)
        with self.assertRaises(ValueError):
            point_at(13, 3)
        with self.assertRaises(ValueError):
            point_at(-1, 3)


class TestOrderValidation(unittest.TestCase):
    def test_given_small_numbers_when_testing_primality_then_expected(self):
        primes = [n for n in range(30) if is_prime(n)]
        self.assertEqual(primes, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])

    def test_given_prime_order_when_checking_then_returned(self):
        self.assertEqual(check_order(7), 7)
        self.assertEqual(check_order(2), 2)

    def test_given_bad_orders_when_checking_then_configuration_error(self):
        for bad in (0, 1, -3, 4, 6, 9, 2.0, "7", True, None):
            with self.assertRaises(ConfigurationError):
                check_order(bad)

    def test_given_composite_order_when_primality_not_required_then_returned(self):
        self.assertEqual(check_order(4, require_prime=False), 4)
        with self.assertRaises(ConfigurationError):
            check_order(1, require_prime=False)

    def test_given_configuration_error_when_caught_as_value_error_then_matches(self):
        with self.assertRaises(ValueError):
            check_order(4)


if __name__ == '__main__':
    unittest.main(verbosity=2)
