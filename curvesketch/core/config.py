"""
Shared constants for the curve editor.

Coordinates are in the normalized [-1, 1] plane, so tolerances are in
normalized units, not pixels.
"""
from dataclasses import dataclass

from .math import RGB

# Per-axis tolerance for picking control points and curves
HIT_TOLERANCE = 0.05

# Parameter samples per curve, for both drawing and hit testing
SAMPLE_COUNT = 100

# Drawing
SELECTED_COLOR = RGB(0.0, 0.0, 1.0)
CONTROL_POINT_COLOR = RGB(1.0, 1.0, 1.0)
BACKGROUND_COLOR = RGB(0.0, 0.0, 0.0)
SELECTED_LINE_WIDTH = 6.0
LINE_WIDTH = 3.0
CONTROL_POINT_SIZE = 10.0

# Initial window size in pixels
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480


@dataclass(frozen=True)
class EditorConfig:
    tolerance: float = HIT_TOLERANCE
    samples: int = SAMPLE_COUNT
    random_colors: bool = False
