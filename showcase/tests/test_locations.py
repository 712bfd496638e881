import unittest

from snaply.locations import SnapLocationSet


class TestSnapLocationSet(unittest.TestCase):
    def test_empty_input_is_just_zero(self):
        locs = SnapLocationSet.build([])
        self.assertEqual(list(locs), [0.0])
        self.assertFalse(locs.has_stops())

    def test_zero_added_when_missing(self):
        self.assertIn(0.0, SnapLocationSet.build([250, 50]).values)

    def test_sorted_and_deduplicated(self):
        locs = SnapLocationSet.build([300, 100, 0, 100, 200, 300.0])
        self.assertEqual(locs.values, (0.0, 100.0, 200.0, 300.0))
        self.assertEqual(locs.last, 300.0)
        self.assertTrue(locs.has_stops())

    def test_strictly_ascending_for_messy_input(self):
        raw = [5, -3, 5, 12.5, 0, 0, -3, 7, 12.5]
        vals = SnapLocationSet.build(raw).values
        self.assertTrue(all(a < b for a, b in zip(vals, vals[1:])))
        self.assertEqual(set(vals), {0.0, 5.0, -3.0, 12.5, 7.0})

    def test_value_semantics(self):
        a = SnapLocationSet.build([100, 200])
        b = SnapLocationSet.build([200, 100, 0])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len(a), 3)
        self.assertEqual(a[1], 100.0)


if __name__ == "__main__":
    unittest.main()
