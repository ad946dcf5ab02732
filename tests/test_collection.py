import pytest

from curvesketch.core import CurveCollection, Polyline, BezierCurve


def line(a, b):
    curve = Polyline()
    curve.append_control_point(a)
    curve.append_control_point(b)
    return curve


@pytest.fixture
def collection():
    return CurveCollection([
        line((-1.0, 0.0), (1.0, 0.0)),
        line((0.0, -1.0), (0.0, 1.0)),
        line((-1.0, 0.5), (1.0, 0.5)),
    ])


def test_add_and_iterate_in_order():
    coll = CurveCollection()
    a, b = Polyline(), BezierCurve()
    assert coll.add(a) == 0
    assert coll.add(b) == 1
    assert list(coll) == [a, b]
    assert len(coll) == 2
    assert coll[1] is b
    with pytest.raises(IndexError):
        coll[2]
    with pytest.raises(TypeError):
        coll.add("not a curve")


def test_hit_test_returns_lowest_index(collection):
    # origin lies on curves 0 and 1
    assert collection.hit_test((0.0, 0.0)) == 0
    assert collection.hit_test((0.0, 0.8)) == 1
    assert collection.hit_test((0.7, 0.5)) == 2
    assert collection.hit_test((0.7, -0.7)) is None
    assert CurveCollection().hit_test((0.0, 0.0)) is None


def test_remove_at_shifts_indices(collection):
    second = collection[1]
    collection[0].selected = True
    removed = collection.remove_at(0)
    assert removed is not None and not removed.selected
    assert len(collection) == 2
    assert collection[0] is second


def test_remove_at_out_of_range_is_noop(collection):
    assert collection.remove_at(3) is None
    assert collection.remove_at(-1) is None
    assert len(collection) == 3
    assert CurveCollection().remove_at(0) is None


def test_get_tolerates_bad_indices(collection):
    assert collection.get(None) is None
    assert collection.get(5) is None
    assert collection.get(2) is collection[2]


def test_clear_releases_everything(collection):
    curves = list(collection)
    curves[0].selected = True
    collection.clear()
    assert len(collection) == 0
    assert not any(c.selected for c in curves)
    collection.clear()
    assert len(collection) == 0


def test_duplicate_point_does_not_capture_every_click():
    dup = Polyline()
    for p in [(0.0, 0.0), (0.0, 0.0), (0.5, 0.5)]:
        dup.append_control_point(p)
    bez = BezierCurve()
    for p in [(-0.5, -0.5), (0.0, -0.9), (0.5, -0.5)]:
        bez.append_control_point(p)
    coll = CurveCollection([dup, bez])
    assert not dup.hit_test((-0.9, 0.9))
    assert coll.hit_test((-0.5, -0.5)) == 1
    assert coll.hit_test((0.01, 0.01)) == 0
    assert coll.hit_test((0.25, 0.25)) == 0


def test_hit_test_uses_given_sample_count():
    bez = BezierCurve()
    for p in [(-0.5, 0.0), (0.0, 0.5), (0.5, 0.0)]:
        bez.append_control_point(p)
    coll = CurveCollection([bez])
    # (0, 0.25) is the curve at t=0.5, between samples when only 3 are taken
    assert coll.hit_test((0.0, 0.25)) == 0
    assert coll.hit_test((0.0, 0.25), samples=3) is None
