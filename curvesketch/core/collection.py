import logging
from typing import Iterator

from .config import HIT_TOLERANCE, SAMPLE_COUNT
from .curves import Curve
from .math import Point

logger = logging.getLogger(__name__)


class CurveCollection:
    """
    Ordered owner of every curve on the canvas.
    Grows by appending, shrinks by explicit removal; never reordered.
    """

    def __init__(self, curves: list[Curve] | None = None):
        self._curves: list[Curve] = list(curves or [])

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self._curves)

    def __getitem__(self, index: int) -> Curve:
        if not (0 <= index < len(self._curves)):
            raise IndexError(index)
        return self._curves[index]

    def get(self, index: int | None) -> Curve | None:
        if index is None or not (0 <= index < len(self._curves)):
            return None
        return self._curves[index]

    def add(self, curve: Curve) -> int:
        if not isinstance(curve, Curve):
            raise TypeError("add expects a curvesketch.core.curves.Curve")
        idx = len(self._curves)
        self._curves.append(curve)
        return idx

    def remove_at(self, index: int) -> Curve | None:
        """
        Remove and release the curve at index. Later indices shift down by one;
        callers holding indices must adjust them.
        """
        if not (0 <= index < len(self._curves)):
            logger.debug("remove_at(%s) ignored, %d curves", index, len(self._curves))
            return None
        curve = self._curves.pop(index)
        curve.selected = False
        return curve

    def hit_test(self, p: Point, tolerance: float = HIT_TOLERANCE, samples: int = SAMPLE_COUNT) -> int | None:
        """Index of the first curve under p, or None."""
        for i, curve in enumerate(self._curves):
            if curve.hit_test(p, tolerance, samples):
                return i
        return None

    def clear(self) -> None:
        n = len(self._curves)
        for curve in self._curves:
            curve.selected = False
        self._curves = []
        if n:
            logger.info("Released %d curve(s)", n)
