import unittest

from snaply.locations import SnapLocationSet
from snaply.resolver import SnapResolver, infer_direction, maximum_value, resolve_offset
from snaply.types import ZERO, Geometry, Point, Size, SnapConfig, SnapDirection, SnapEdge
from showcase.tests.fakes import FakeViewport

H = SnapDirection.HORIZONTAL
V = SnapDirection.VERTICAL


def _geo(bounds=10, content=1000, direction=H):
    if direction is H:
        return Geometry(bounds=Size(bounds, 10), content_size=Size(content, 10))
    return Geometry(bounds=Size(10, bounds), content_size=Size(10, content))


class TestResolveOffset(unittest.TestCase):
    locs = SnapLocationSet.build([0, 100, 200, 300])

    def test_non_positive_offsets_snap_to_zero(self):
        for x in (0, -1, -500):
            self.assertEqual(resolve_offset(Point(x, 0), _geo(), SnapEdge.MIN, H, self.locs), ZERO)

    def test_mid_edge_scenario(self):
        # 120 + 25 = 145 -> between 100 and 200, mid 150 -> 100 - 25
        got = resolve_offset(Point(120, 0), _geo(bounds=50), SnapEdge.MID, H, self.locs)
        self.assertEqual(got, Point(75, 0))

    def test_max_edge_shifts_by_full_bounds(self):
        # 120 + 50 = 170 -> nearer 200 -> 200 - 50
        got = resolve_offset(Point(120, 0), _geo(bounds=50), SnapEdge.MAX, H, self.locs)
        self.assertEqual(got, Point(150, 0))

    def test_midpoint_tie_prefers_next(self):
        locs = SnapLocationSet.build([0, 100, 200])
        self.assertEqual(resolve_offset(Point(150, 0), _geo(), SnapEdge.MIN, H, locs), Point(200, 0))
        self.assertEqual(resolve_offset(Point(149.9, 0), _geo(), SnapEdge.MIN, H, locs), Point(100, 0))

    def test_exact_location_is_kept_for_min_edge(self):
        for loc in (100, 200, 300):
            self.assertEqual(resolve_offset(Point(loc, 0), _geo(), SnapEdge.MIN, H, self.locs), Point(loc, 0))

    def test_resolving_a_snapped_offset_is_stable(self):
        for edge in SnapEdge:
            first = resolve_offset(Point(130, 0), _geo(bounds=50), edge, H, self.locs)
            again = resolve_offset(first, _geo(bounds=50), edge, H, self.locs)
            self.assertEqual(first, again, edge)

    def test_past_last_location_returns_last(self):
        got = resolve_offset(Point(350, 0), _geo(bounds=100, content=500), SnapEdge.MIN, H, self.locs)
        self.assertEqual(got, Point(min(300, 400), 0))

    def test_past_last_location_is_clamped_to_content_end(self):
        locs = SnapLocationSet.build([100, 300, 450])
        got = resolve_offset(Point(460, 0), _geo(bounds=100, content=500), SnapEdge.MIN, H, locs)
        self.assertEqual(got, Point(400, 0))

    def test_past_last_location_clamped_for_max_edge(self):
        locs = SnapLocationSet.build([100, 500])
        # 450 + 100 = 550 runs past 500; the viewport can only reach 500 - 100
        got = resolve_offset(Point(450, 0), _geo(bounds=100, content=500), SnapEdge.MAX, H, locs)
        self.assertEqual(got, Point(400, 0))

    def test_past_last_location_with_short_content(self):
        locs = SnapLocationSet.build([20])
        got = resolve_offset(Point(30, 0), _geo(bounds=100, content=50), SnapEdge.MIN, H, locs)
        self.assertEqual(got, ZERO)

    def test_next_is_clamped_to_content_end(self):
        locs = SnapLocationSet.build([100, 300, 600])
        geo = _geo(bounds=100, content=500)
        # next 600 -> 400, prev 300, mid 350
        self.assertEqual(resolve_offset(Point(450, 0), geo, SnapEdge.MIN, H, locs), Point(400, 0))
        self.assertEqual(resolve_offset(Point(320, 0), geo, SnapEdge.MIN, H, locs), Point(300, 0))

    def test_value_equal_to_last_location(self):
        locs = SnapLocationSet.build([100, 200])
        self.assertEqual(resolve_offset(Point(200, 0), _geo(), SnapEdge.MIN, H, locs), Point(200, 0))

    def test_content_smaller_than_viewport_gives_zero(self):
        locs = SnapLocationSet.build([100])
        geo = _geo(bounds=100, content=50)
        self.assertEqual(resolve_offset(Point(30, 0), geo, SnapEdge.MIN, H, locs), ZERO)

    def test_result_never_negative(self):
        locs = SnapLocationSet.build([100])
        got = resolve_offset(Point(10, 0), _geo(bounds=50), SnapEdge.MID, H, locs)
        self.assertEqual(got, ZERO)

    def test_vertical_uses_y_and_zeroes_x(self):
        locs = SnapLocationSet.build([100, 200])
        got = resolve_offset(Point(999, 120), _geo(direction=V), SnapEdge.MIN, V, locs)
        self.assertEqual(got, Point(0, 100))

    def test_zero_geometry_does_not_raise(self):
        geo = Geometry(bounds=Size(0, 0), content_size=Size(0, 0))
        self.assertEqual(resolve_offset(Point(0, 40), geo, SnapEdge.MID, V, self.locs), ZERO)


class TestMaximumValue(unittest.TestCase):
    def test_per_edge(self):
        geo = _geo(bounds=100, content=500)
        self.assertEqual(maximum_value(SnapEdge.MIN, H, geo), 400)
        self.assertEqual(maximum_value(SnapEdge.MID, H, geo), 450)
        self.assertEqual(maximum_value(SnapEdge.MAX, H, geo), 500)

    def test_uses_active_axis(self):
        geo = Geometry(bounds=Size(100, 40), content_size=Size(500, 300))
        self.assertEqual(maximum_value(SnapEdge.MIN, V, geo), 260)


class TestInferDirection(unittest.TestCase):
    def test_list_is_always_vertical(self):
        self.assertIs(infer_direction(H, Size(300, 100), is_list=True), V)

    def test_explicit_direction_wins_over_geometry(self):
        self.assertIs(infer_direction(H, Size(10, 900)), H)
        self.assertIs(infer_direction(V, Size(900, 10), is_grid=True, grid_vertical=False), V)

    def test_grid_uses_its_scroll_axis(self):
        auto = SnapDirection.AUTOMATIC
        self.assertIs(infer_direction(auto, Size(300, 100), is_grid=True, grid_vertical=True), V)
        self.assertIs(infer_direction(auto, Size(100, 300), is_grid=True, grid_vertical=False), H)

    def test_content_aspect_fallback(self):
        auto = SnapDirection.AUTOMATIC
        self.assertIs(infer_direction(auto, Size(300, 100)), H)
        self.assertIs(infer_direction(auto, Size(100, 300)), V)
        self.assertIs(infer_direction(auto, Size(200, 200)), V)
        self.assertIs(infer_direction(auto, Size(0, 0)), V)


class TestSnapResolver(unittest.TestCase):
    def _resolver(self, **vp):
        viewport = FakeViewport(**vp)
        return viewport, SnapResolver(viewport, SnapConfig(edge=SnapEdge.MIN))

    def test_defaults(self):
        _, r = self._resolver()
        self.assertIs(r.edge, SnapEdge.MIN)
        self.assertIs(r.direction, SnapDirection.AUTOMATIC)
        self.assertEqual(list(r.locations), [0.0])

    def test_supported_direction_reads_viewport_hints(self):
        _, r = self._resolver(content_size=Size(1000, 100))
        self.assertIs(r.supported_direction(), H)
        _, r = self._resolver(content_size=Size(1000, 100), is_grid=True, grid_direction=V)
        self.assertIs(r.supported_direction(), V)
        _, r = self._resolver(content_size=Size(1000, 100), is_list=True)
        self.assertIs(r.supported_direction(), V)

    def test_drag_end_without_locations_defers_to_host(self):
        vp, r = self._resolver()
        d = r.on_drag_end(Point(500, 0), Point(130, 0))
        self.assertFalse(d.override_target)
        self.assertFalse(d.animate)
        self.assertTrue(d.run_downstream)
        self.assertEqual(d.offset, Point(130, 0))
        self.assertEqual(vp.moves, [])

    def test_drag_end_without_speed_animates_and_stops(self):
        _, r = self._resolver()
        r.set_locations([100, 200, 300])
        d = r.on_drag_end(Point(0, 0), Point(130, 0))
        self.assertEqual(d.offset, Point(100, 0))
        self.assertTrue(d.animate)
        self.assertFalse(d.override_target)
        self.assertFalse(d.run_downstream)

    def test_speed_is_measured_on_active_axis(self):
        _, r = self._resolver()
        r.set_locations([100, 200])
        d = r.on_drag_end(Point(0, 900), Point(180, 0))
        self.assertFalse(d.override_target)

    def test_drag_end_with_speed_overrides_target(self):
        _, r = self._resolver()
        r.set_locations([100, 200, 300])
        d = r.on_drag_end(Point(-250, 0), Point(180, 0))
        self.assertEqual(d.offset, Point(200, 0))
        self.assertTrue(d.override_target)
        self.assertTrue(d.animate)
        self.assertTrue(d.run_downstream)

    def test_set_locations_realigns_from_current_offset(self):
        vp, r = self._resolver(content_offset=Point(140, 0))
        r.set_locations([100, 200], realign=True)
        self.assertEqual(vp.moves, [Point(100, 0)])

    def test_setters_without_realign_leave_viewport_alone(self):
        vp, r = self._resolver(content_offset=Point(140, 0))
        r.set_locations([100, 200])
        r.set_edge(SnapEdge.MAX)
        r.set_direction(H)
        self.assertEqual(vp.moves, [])
        self.assertIs(r.edge, SnapEdge.MAX)
        self.assertIs(r.direction, H)

    def test_set_edge_realign(self):
        vp, r = self._resolver(content_offset=Point(120, 0), bounds=Size(50, 100))
        r.set_locations([100, 200, 300])
        r.set_edge(SnapEdge.MID, realign=True)
        self.assertEqual(vp.moves, [Point(75, 0)])

    def test_set_direction_realign(self):
        vp, r = self._resolver(content_offset=Point(130, 160), content_size=Size(1000, 1000))
        r.set_locations([100, 200])
        r.set_direction(V, realign=True)
        self.assertEqual(vp.moves, [Point(0, 200)])

    def test_scroll_to_nearest_returns_target(self):
        vp, r = self._resolver()
        r.set_locations([100, 200])
        self.assertEqual(r.scroll_to_nearest(Point(190, 0)), Point(200, 0))
        self.assertEqual(vp.content_offset, Point(200, 0))

    def test_repr_lists_locations(self):
        _, r = self._resolver()
        r.set_locations([50])
        self.assertIn("[0.0, 50.0]", repr(r))


if __name__ == "__main__":
    unittest.main()
