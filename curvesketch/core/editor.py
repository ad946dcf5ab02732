import functools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .collection import CurveCollection
from .config import EditorConfig
from .curves import Curve
from .math import Point, RGB
from .registries import key_registry

logger = logging.getLogger(__name__)


class Mode(Enum):
    IDLE = "Idle"
    DRAWING = "Drawing"
    ADDING_POINTS = "Adding points"
    DELETING_POINTS = "Deleting points"
    MOVING_POINT = "Moving point"


class MouseButton(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


DELETE_KEY = "d"
APPEND_KEY = "a"
CYCLE_KEY = " "

# modes a key release falls back from
_KEY_HELD_MODES = (Mode.DRAWING, Mode.ADDING_POINTS, Mode.DELETING_POINTS)


@dataclass
class EditorContext:
    """
      - selected_index: index of the selected curve in the collection
      - mode: current interaction mode
      - drag_index: control point being dragged while mode is MOVING_POINT
      - mode_before_drag: mode restored on mouse release
      - keys_down: keys currently held, used to drop auto-repeat
      - last_index: most recently created curve, checked on key release
    """
    selected_index: int | None = None
    mode: Mode = Mode.IDLE
    drag_index: int | None = None
    mode_before_drag: Mode = Mode.IDLE
    keys_down: set[str] = field(default_factory=set)
    last_index: int | None = None


def _redraws(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        finally:
            self.request_redraw()
    return wrapper


class CurveEditor:
    """
    Interprets keyboard and mouse events as edits on a CurveCollection.

    Points handed to the handlers are already in the normalized [-1, 1]
    plane. `request_redraw` is called once at the end of every handler; it
    should schedule a repaint, not perform one.
    """

    def __init__(self,
                 collection: CurveCollection | None = None,
                 context: EditorContext | None = None,
                 config: EditorConfig | None = None,
                 request_redraw: Callable[[], None] | None = None,
                 ):
        self.collection = collection if collection is not None else CurveCollection()
        self.context = context or EditorContext()
        self.config = config or EditorConfig()
        self.request_redraw = request_redraw or (lambda: None)

    # ---- accessors ----------------------------------------------------------
    @property
    def mode(self) -> Mode:
        return self.context.mode

    @property
    def selected_index(self) -> int | None:
        return self.context.selected_index

    @property
    def selected_curve(self) -> Curve | None:
        return self.collection.get(self.context.selected_index)

    # ---- selection / removal helpers ---------------------------------------
    def _unselect(self) -> None:
        curve = self.selected_curve
        if curve is not None:
            curve.selected = False
        self.context.selected_index = None

    def _select(self, index: int) -> None:
        self._unselect()
        curve = self.collection.get(index)
        if curve is None:
            return
        curve.selected = True
        self.context.selected_index = index

    def _remove_curve(self, index: int) -> None:
        ctx = self.context
        if self.collection.remove_at(index) is None:
            return
        logger.debug("Removed curve %d", index)

        sel = ctx.selected_index
        if sel is not None:
            if sel == index:
                ctx.selected_index = None
                if ctx.mode == Mode.MOVING_POINT:
                    self._end_drag()
            elif sel > index:
                ctx.selected_index = sel - 1

        last = ctx.last_index
        if last is not None and last >= index:
            last -= 1
            ctx.last_index = last if last >= 0 else None

    def _end_drag(self) -> None:
        ctx = self.context
        ctx.mode = ctx.mode_before_drag
        ctx.drag_index = None

    def _new_curve(self, cls: type[Curve]) -> None:
        self._unselect()
        # a curve still being drawn under another held key is abandoned
        prev = self.collection.get(self.context.last_index)
        if prev is not None and prev.control_point_count() < 2:
            logger.debug("Dropping unfinished curve %d", self.context.last_index)
            self._remove_curve(self.context.last_index)
        color = RGB.random() if self.config.random_colors else None
        curve = cls(color=color)
        idx = self.collection.add(curve)
        self.context.last_index = idx
        self.context.drag_index = None
        self._select(idx)
        self.context.mode = Mode.DRAWING
        logger.debug("Created %s curve at index %d", curve.kind, idx)

    def _cycle_selection(self) -> None:
        n = len(self.collection)
        if n == 0:
            return
        sel = self.context.selected_index
        if sel is None:
            nxt = 0
        else:
            nxt = sel + 1 if sel + 1 < n else 0
        self._select(nxt)

    # ---- keyboard -----------------------------------------------------------
    @_redraws
    def key_down(self, key: str) -> None:
        ctx = self.context
        if key in ctx.keys_down:
            return
        ctx.keys_down.add(key)

        if key in key_registry:
            self._new_curve(key_registry[key])
        elif key == DELETE_KEY:
            if self.selected_curve is not None:
                ctx.mode = Mode.DELETING_POINTS
        elif key == APPEND_KEY:
            if self.selected_curve is not None:
                ctx.mode = Mode.ADDING_POINTS
        elif key == CYCLE_KEY:
            self._cycle_selection()

    @_redraws
    def key_up(self, key: str) -> None:
        ctx = self.context
        ctx.keys_down.discard(key)
        if ctx.mode in _KEY_HELD_MODES:
            ctx.mode = Mode.IDLE

        last = self.collection.get(ctx.last_index)
        if last is not None and last.control_point_count() < 2:
            logger.debug("Dropping curve %d with %d point(s)", ctx.last_index, last.control_point_count())
            self._unselect()
            self._remove_curve(ctx.last_index)

    # ---- mouse --------------------------------------------------------------
    @_redraws
    def mouse_down(self, p: Point, button: MouseButton = MouseButton.LEFT) -> None:
        if button != MouseButton.LEFT:
            return
        ctx = self.context
        tol = self.config.tolerance
        curve = self.selected_curve

        if ctx.mode in (Mode.DRAWING, Mode.ADDING_POINTS):
            if curve is not None:
                curve.append_control_point(p)
                logger.debug("Appended %s to curve %d", p, ctx.selected_index)
        elif ctx.mode == Mode.DELETING_POINTS:
            if curve is None:
                return
            idx = curve.nearest_control_point(p, tol)
            if idx is not None:
                curve.remove_control_point(idx)
                logger.debug("Deleted point %d of curve %d", idx, ctx.selected_index)
            if curve.control_point_count() < 2:
                sel = ctx.selected_index
                self._unselect()
                self._remove_curve(sel)
        elif ctx.mode == Mode.IDLE:
            hit = self.collection.hit_test(p, tol, self.config.samples)
            if hit is not None:
                self._select(hit)
            curve = self.selected_curve
            if curve is None:
                return
            idx = curve.nearest_control_point(p, tol)
            if idx is not None:
                ctx.mode_before_drag = ctx.mode
                ctx.mode = Mode.MOVING_POINT
                ctx.drag_index = idx

    @_redraws
    def mouse_move(self, p: Point) -> None:
        ctx = self.context
        if ctx.mode != Mode.MOVING_POINT:
            return
        curve = self.selected_curve
        if curve is not None and ctx.drag_index is not None:
            curve.move_control_point(ctx.drag_index, p)

    @_redraws
    def mouse_up(self, p: Point, button: MouseButton = MouseButton.LEFT) -> None:
        ctx = self.context
        if button != MouseButton.LEFT or ctx.mode != Mode.MOVING_POINT:
            return
        curve = self.selected_curve
        if curve is not None and ctx.drag_index is not None:
            curve.move_control_point(ctx.drag_index, p)
            logger.debug("Moved point %d of curve %d to %s", ctx.drag_index, ctx.selected_index, p)
        self._end_drag()

    # ---- whole-canvas actions ----------------------------------------------
    @_redraws
    def delete_selected_curve(self) -> None:
        sel = self.context.selected_index
        if sel is None:
            return
        self._unselect()
        self._remove_curve(sel)

    @_redraws
    def clear(self) -> None:
        self.collection.clear()
        keys = self.context.keys_down
        self.context = EditorContext(keys_down=keys)
