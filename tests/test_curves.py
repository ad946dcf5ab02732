import pytest

from curvesketch.core import Polyline, BezierCurve, LagrangeCurve, RGB
from curvesketch.core.registries import curve_registry, key_registry, register_curve


def make(cls, *pts):
    curve = cls()
    for p in pts:
        curve.append_control_point(p)
    return curve


def test_registry_maps_kinds_and_keys():
    assert curve_registry == {"polyline": Polyline, "bezier": BezierCurve, "lagrange": LagrangeCurve}
    assert key_registry["b"] is BezierCurve
    assert key_registry["l"] is LagrangeCurve
    assert key_registry["p"] is Polyline
    assert BezierCurve.kind == "bezier"


def test_registry_rejects_duplicates():
    with pytest.raises(ValueError):
        register_curve("bezier", key="z")(BezierCurve)
    with pytest.raises(ValueError):
        register_curve("other", key="b")(BezierCurve)


def test_default_and_custom_colors():
    assert Polyline().color == RGB(0.6, 0.1, 0.8)
    assert BezierCurve().color == RGB(0.2, 0.9, 0.2)
    assert LagrangeCurve().color == RGB(1.0, 0.4, 0.7)
    assert BezierCurve(color=RGB(0.1, 0.2, 0.3)).color == RGB(0.1, 0.2, 0.3)


@pytest.mark.parametrize("n", [2, 3, 4, 7])
def test_bezier_interpolates_endpoints(n):
    pts = [(i / n, (-1) ** i * 0.5) for i in range(n)]
    curve = make(BezierCurve, *pts)
    assert curve.evaluate(0.0) == pytest.approx(pts[0])
    assert curve.evaluate(1.0 - 1e-9) == pytest.approx(pts[-1], abs=1e-6)


def test_bezier_needs_two_points():
    with pytest.raises(ValueError):
        make(BezierCurve, (0.0, 0.0)).evaluate(0.5)


@pytest.mark.parametrize("n", [2, 3, 5, 6])
def test_lagrange_passes_through_control_points(n):
    pts = [(i * 0.3 - 0.8, (i % 2) * 0.4) for i in range(n)]
    curve = make(LagrangeCurve, *pts)
    assert len(curve.knots) == n
    for k, p in zip(curve.knots, pts):
        assert curve.evaluate(k) == pytest.approx(p, abs=1e-9)


def test_lagrange_knots_follow_points():
    curve = LagrangeCurve()
    assert curve.knots == []
    curve.append_control_point((0.0, 0.0))
    assert curve.knots == [0.0]
    curve.append_control_point((0.5, 0.5))
    curve.append_control_point((1.0, 0.0))
    assert curve.knots == pytest.approx([0.0, 0.5, 1.0])
    curve.remove_control_point(1)
    assert curve.knots == pytest.approx([0.0, 1.0])
    # moving does not reparameterize
    curve.move_control_point(0, (0.2, 0.2))
    assert curve.knots == pytest.approx([0.0, 1.0])


def test_lagrange_append_then_remove_restores_knots():
    curve = make(LagrangeCurve, (0.0, 0.0), (0.3, 0.5), (0.6, -0.2))
    before = list(curve.knots)
    curve.append_control_point((0.9, 0.1))
    curve.remove_control_point(3)
    assert curve.knots == before


def test_remove_and_move_out_of_range_are_noops():
    curve = make(BezierCurve, (0.0, 0.0), (1.0, 1.0))
    assert not curve.remove_control_point(2)
    assert not curve.remove_control_point(-1)
    assert not curve.move_control_point(5, (0.0, 0.0))
    assert curve.points == [(0.0, 0.0), (1.0, 1.0)]
    assert not BezierCurve().remove_control_point(0)


def test_nearest_control_point():
    assert BezierCurve().nearest_control_point((0.0, 0.0)) is None
    curve = make(Polyline, (0.5, 0.5), (0.0, 0.0), (0.02, 0.01))
    # both 1 and 2 are within tolerance, the lowest index wins
    assert curve.nearest_control_point((0.01, 0.0)) == 1
    assert curve.nearest_control_point((0.5, 0.54)) == 0
    assert curve.nearest_control_point((0.9, 0.9)) is None
    assert curve.nearest_control_point((0.5, 0.6), tolerance=0.2) == 0


def test_polyline_path_and_hit_test():
    curve = make(Polyline, (0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    assert curve.path() == curve.points
    assert curve.hit_test((0.5, 0.0))
    assert curve.hit_test((1.0, 0.5))
    assert not curve.hit_test((0.5, 0.5))
    with pytest.raises(NotImplementedError):
        curve.evaluate(0.5)


def test_short_curves_have_no_path_and_never_hit():
    for cls in (Polyline, BezierCurve, LagrangeCurve):
        curve = make(cls, (0.0, 0.0))
        assert curve.path() == []
        assert not curve.hit_test((0.0, 0.0))


def test_sampled_hit_test():
    curve = make(BezierCurve, (-0.5, 0.0), (0.0, 0.5), (0.5, 0.0))
    assert len(curve.path()) == 100
    assert curve.hit_test(curve.evaluate(0.5))
    assert curve.hit_test((-0.5, 0.0))
    assert not curve.hit_test((0.0, -0.5))
