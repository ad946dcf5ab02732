import logging
from abc import ABC, abstractmethod
from typing import ClassVar, override

from .config import HIT_TOLERANCE, SAMPLE_COUNT
from .math import (
    Point, RGB, de_casteljau, lagrange_basis, point_on_segment, sample_parameters,
    scale, add, uniform_knots, within_box,
)
from .registries import register_curve

logger = logging.getLogger(__name__)


class Curve(ABC):
    """
    GUI-agnostic curve over an ordered list of control points.

    The order of `points` is the curve parameterization; a point's index is
    its identity and shifts when earlier points are removed.
    """
    kind: ClassVar[str] = ""
    default_color: ClassVar[RGB] = RGB(1.0, 1.0, 1.0)

    def __init__(self, color: RGB | None = None):
        self.points: list[Point] = []
        self.selected = False
        self.color = color or self.default_color

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(points={self.points!r}, selected={self.selected})"

    @abstractmethod
    def evaluate(self, t: float) -> Point:
        """
        Position at parameter t in [0, 1). Callers make sure the curve has at
        least 2 control points.
        """

    # ---- control points -----------------------------------------------------
    def control_point_count(self) -> int:
        return len(self.points)

    def append_control_point(self, p: Point) -> None:
        self.points.append((float(p[0]), float(p[1])))
        self._points_changed()

    def remove_control_point(self, index: int) -> bool:
        if index < 0 or index >= len(self.points):
            logger.debug("%s: no control point %s to remove", self.kind, index)
            return False
        self.points.pop(index)
        self._points_changed()
        return True

    def move_control_point(self, index: int, p: Point) -> bool:
        if index < 0 or index >= len(self.points):
            return False
        self.points[index] = (float(p[0]), float(p[1]))
        return True

    def nearest_control_point(self, p: Point, tolerance: float = HIT_TOLERANCE) -> int | None:
        """First (lowest) index within the per-axis tolerance of p, or None."""
        for i, cp in enumerate(self.points):
            if within_box(cp, p, tolerance):
                return i
        return None

    def _points_changed(self) -> None:
        pass

    # ---- geometry -----------------------------------------------------------
    def path(self, samples: int = SAMPLE_COUNT) -> list[Point]:
        """Line strip to draw for this curve; empty below 2 control points."""
        if len(self.points) < 2:
            return []
        return [self.evaluate(t) for t in sample_parameters(samples)]

    def hit_test(self, p: Point, tolerance: float = HIT_TOLERANCE, samples: int = SAMPLE_COUNT) -> bool:
        """
        Sampled proximity test. Thin stretches between two samples can be
        missed; variants with an exact test override this.
        """
        if len(self.points) < 2:
            return False
        return any(within_box(q, p, tolerance) for q in self.path(samples))


@register_curve("polyline", key="p")
class Polyline(Curve):
    """
    Piecewise-linear path through the control points, drawn as-is.
    """
    default_color = RGB(0.6, 0.1, 0.8)

    @override
    def evaluate(self, t: float) -> Point:
        raise NotImplementedError("a polyline has no single-parameter form")

    @override
    def path(self, samples: int = SAMPLE_COUNT) -> list[Point]:
        if len(self.points) < 2:
            return []
        return list(self.points)

    @override
    def hit_test(self, p: Point, tolerance: float = HIT_TOLERANCE, samples: int = SAMPLE_COUNT) -> bool:
        pts = self.points
        for a, b in zip(pts, pts[1:]):
            if point_on_segment(a, b, p, tolerance):
                return True
        return False


@register_curve("bezier", key="b")
class BezierCurve(Curve):
    """
    Sum of control points weighted by the Bernstein basis, computed with
    de Casteljau's algorithm.
    """
    default_color = RGB(0.2, 0.9, 0.2)

    @override
    def evaluate(self, t: float) -> Point:
        if len(self.points) < 2:
            raise ValueError("a Bezier curve needs at least 2 control points")
        return de_casteljau(self.points, t)


@register_curve("lagrange", key="l")
class LagrangeCurve(Curve):
    """
    Interpolating polynomial through the control points, one uniform knot
    per point. Knots are rebuilt from scratch whenever points are added or
    removed.
    """
    default_color = RGB(1.0, 0.4, 0.7)

    def __init__(self, color: RGB | None = None):
        super().__init__(color)
        self.knots: list[float] = []

    @override
    def _points_changed(self) -> None:
        self.knots = uniform_knots(len(self.points))

    @override
    def evaluate(self, t: float) -> Point:
        n = len(self.points)
        if n < 2:
            raise ValueError("a Lagrange curve needs at least 2 control points")
        r: Point = (0.0, 0.0)
        for i, cp in enumerate(self.points):
            r = add(r, scale(cp, lagrange_basis(i, self.knots, t)))
        return r
