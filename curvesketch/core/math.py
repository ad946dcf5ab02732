import random as _random
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtGui import QColor

Point = tuple[float, float]


def add(a: Point, b: Point) -> Point:
    return a[0] + b[0], a[1] + b[1]

def sub(a: Point, b: Point) -> Point:
    return a[0] - b[0], a[1] - b[1]

def scale(p: Point, w: float) -> Point:
    return p[0] * w, p[1] * w

def cross(a: Point, b: Point) -> float:
    return a[0] * b[1] - a[1] * b[0]

def dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1]


def within_box(a: Point, b: Point, tolerance: float) -> bool:
    """
    Per-axis proximity test: both |dx| and |dy| strictly below tolerance.
    This is not a euclidean distance.
    """
    return abs(a[0] - b[0]) < tolerance and abs(a[1] - b[1]) < tolerance


def point_on_segment(a: Point, b: Point, m: Point, tolerance: float = 0.05) -> bool:
    """
    True if m lies on segment a -> b within the tolerance band:
      - cross((b-a),(m-a)) is near zero (colinear)
      - dot((m-a),(b-a)) >= 0 (not behind a)
      - dot((m-a),(b-a)) <= |b-a|^2 (not past b)
    A zero-length segment degrades to the per-axis point test.
    """
    ab = sub(b, a)
    if dot(ab, ab) == 0.0:
        return within_box(a, m, tolerance)
    am = sub(m, a)
    if abs(cross(ab, am)) > tolerance:
        return False
    d = dot(am, ab)
    if d < 0.0:
        return False
    return d <= dot(ab, ab)


def bernstein(i: int, n: int, t: float) -> float:
    """
    Bernstein weight B(i, n, t), built bottom-up from B(.,1,t) with
    B(i,n,t) = (1-t)*B(i,n-1,t) + t*B(i-1,n-1,t).
    """
    if i < 0 or i > n:
        return 0.0
    u = 1.0 - t
    row = [1.0]
    for _ in range(n):
        nxt = [0.0] * (len(row) + 1)
        for k, w in enumerate(row):
            nxt[k] += u * w
            nxt[k + 1] += t * w
        row = nxt
    return row[i]


def de_casteljau(points: Sequence[Point], t: float) -> Point:
    if not points:
        raise ValueError("de_casteljau needs at least one point")
    u = 1.0 - t
    work = [(float(x), float(y)) for x, y in points]
    for level in range(len(work) - 1, 0, -1):
        for k in range(level):
            (ax, ay), (bx, by) = work[k], work[k + 1]
            work[k] = (u * ax + t * bx, u * ay + t * by)
    return work[0]


def uniform_knots(count: int) -> list[float]:
    if count <= 0:
        return []
    if count == 1:
        return [0.0]
    n = count - 1
    return [i / n for i in range(count)]


def lagrange_basis(i: int, knots: Sequence[float], t: float) -> float:
    num = 1.0
    den = 1.0
    ki = knots[i]
    for j, kj in enumerate(knots):
        if j == i:
            continue
        num *= (t - kj)
        den *= (ki - kj)
    return num / den


def sample_parameters(n: int = 100) -> list[float]:
    """t = 0, 1/n, ..., (n-1)/n; the end of the range is never reached."""
    return [i / n for i in range(n)]


# ---- device <-> normalized coordinates --------------------------------------
def normalize_device(x: float, y: float, width: float, height: float) -> Point:
    """Pixel position (y down) -> [-1, 1] plane (y up)."""
    return x * 2.0 / width - 1.0, -y * 2.0 / height + 1.0

def device_from_normalized(p: Point, width: float, height: float) -> tuple[float, float]:
    return (p[0] + 1.0) * width / 2.0, (1.0 - p[1]) * height / 2.0


@dataclass(frozen=True)
class RGB:
    """
    Plain color container, components in [0, 1].
    Converted to a QColor only at paint time.
    """
    r: float
    g: float
    b: float

    def to_rgb255(self) -> tuple[int, int, int]:
        clamp = lambda c: max(0, min(255, int(round(c * 255))))
        return clamp(self.r), clamp(self.g), clamp(self.b)

    def to_QColor(self) -> "QColor":
        from PySide6.QtGui import QColor
        r, g, b = self.to_rgb255()
        return QColor(r, g, b)

    @staticmethod
    def random(rng: _random.Random | None = None) -> "RGB":
        rng = rng or _random
        return RGB(rng.random(), rng.random(), rng.random())
