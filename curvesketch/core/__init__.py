from .math import Point, RGB
from .curves import Curve, Polyline, BezierCurve, LagrangeCurve
from .collection import CurveCollection
from .config import EditorConfig
from .editor import CurveEditor, EditorContext, Mode, MouseButton
from .registries import curve_registry, key_registry

__all__ = [
    "Point", "RGB",
    "Curve", "Polyline", "BezierCurve", "LagrangeCurve",
    "CurveCollection",
    "EditorConfig",
    "CurveEditor", "EditorContext", "Mode", "MouseButton",
    "curve_registry", "key_registry",
]
