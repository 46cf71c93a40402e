"""Vertex editor scene: orthographic views, touch dragging and key input."""

from __future__ import annotations

import enum
from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar

from cubesculpt.model import Model, Vertex

_N = TypeVar("_N", int, float)

CLEAR_COLOR = 0x68B0D8FF
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 240
MAX_VERTEX = 100

VERTEX_RADIUS = 6.0
VIEWPORT_TOP_LEFT = (0, 0)
VIEWPORT_BOTTOM_RIGHT = (320, 240)
MODEL_SIZE = 2.0
MODEL_BOUND = 1.0
ANGLE_STEP = 1.0 / 256

Point = Tuple[float, float]


def clamp(value: _N, lo: _N, hi: _N) -> _N:
    """Limit value to the closed range [lo, hi]."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


class ViewState(enum.Enum):
    """Which orthographic projection the bottom screen shows."""

    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


class Key(enum.IntFlag):
    """Buttons the editor reacts to."""

    START = 1 << 3
    DRIGHT = 1 << 4
    DLEFT = 1 << 5
    DUP = 1 << 6
    DDOWN = 1 << 7


def _viewport() -> Tuple[float, float, float]:
    """Return (scale, centre x, centre y) mapping model space onto the viewport."""
    (x1, y1), (x2, y2) = VIEWPORT_TOP_LEFT, VIEWPORT_BOTTOM_RIGHT
    scale = min((x2 - x1) / MODEL_SIZE, (y2 - y1) / MODEL_SIZE)
    return scale, (x1 + x2) / 2.0, (y1 + y2) / 2.0


class EditorScene:
    """Edits a model by dragging its vertices in a 2D projection.

    ``angle_x`` and ``angle_y`` are the rotation of the 3D preview, changed
    by the direction pad.
    """

    def __init__(self, state: ViewState = ViewState.TOP) -> None:
        self.state = ViewState(state)
        self.model = Model()
        self.dragged = False
        self.selected: Optional[Vertex] = None
        self.angle_x = 45.0
        self.angle_y = 45.0
        self.debug_text = str(self.model.tri_count)

    def user_input(
        self,
        keys_down: int = 0,
        keys_held: int = 0,
        touch: Sequence[float] = (0, 0),
    ) -> bool:
        """Process one frame of input; return True when the editor should exit."""
        should_exit = self.handle_keys(keys_down, keys_held)
        px, py = touch
        self.handle_touch(px, py)
        return should_exit

    def handle_keys(self, keys_down: int, keys_held: int) -> bool:
        """Rotate the preview with held keys; return True if START was pressed."""
        if Key(keys_down) & Key.START:
            return True
        held = Key(keys_held)
        if held & Key.DRIGHT:
            self.angle_y += ANGLE_STEP
        if held & Key.DLEFT:
            self.angle_y -= ANGLE_STEP
        if held & Key.DUP:
            self.angle_x -= ANGLE_STEP
        if held & Key.DDOWN:
            self.angle_x += ANGLE_STEP
        return False

    def _vertex_at(self, px: float, py: float) -> Optional[Vertex]:
        best = VERTEX_RADIUS * VERTEX_RADIUS
        found: Optional[Vertex] = None
        for v in self.model.vertices:
            vx, vy = self.project_to_2d(v)
            dist_sq = (vx - px) ** 2 + (vy - py) ** 2
            if dist_sq <= best:
                best = dist_sq
                found = v
        return found

    def _clamped(self, pos: List[float]) -> List[float]:
        axes = {
            ViewState.TOP: (0, 1),
            ViewState.LEFT: (2, 1),
            ViewState.RIGHT: (0, 2),
        }[self.state]
        for axis in axes:
            pos[axis] = clamp(pos[axis], -MODEL_BOUND, MODEL_BOUND)
        return pos

    def handle_touch(self, px: float, py: float) -> None:
        """Pick, drag or release a vertex; (0, 0) means the screen is untouched."""
        if not (px == 0 and py == 0):
            if not self.dragged:
                self.selected = self._vertex_at(px, py)
            self.dragged = True
            if self.selected is not None:
                new_pos = self._clamped(self.screen_to_model(px, py, self.selected))
                self.model.update_vertex(self.selected, *new_pos)
        elif self.dragged:
            self.dragged = False
            if self.selected is not None:
                self.model.generate_tris()
        self.debug_text = str(px)

    def project_to_2d(self, v: Vertex) -> Point:
        """Map a vertex to bottom-screen coordinates in the current view."""
        if self.state is ViewState.TOP:
            model_x, model_y = v.pos[0], -v.pos[1]
        elif self.state is ViewState.LEFT:
            model_x, model_y = v.pos[2], -v.pos[1]
        else:
            model_x, model_y = v.pos[0], -v.pos[2]
        scale, cx, cy = _viewport()
        return model_x * scale + cx, model_y * scale + cy

    def screen_to_model(
        self, screen_x: float, screen_y: float, reference: Optional[Vertex]
    ) -> List[float]:
        """Map a screen point back to model space.

        The axis hidden by the current view keeps the reference vertex's
        value, or zero when there is no reference.
        """
        scale, cx, cy = _viewport()
        a = (screen_x - cx) / scale
        b = (screen_y - cy) / scale
        result = list(reference.pos) if reference is not None else [0.0, 0.0, 0.0]
        if self.state is ViewState.TOP:
            result[0], result[1] = a, -b
        elif self.state is ViewState.LEFT:
            result[2], result[1] = a, -b
        else:
            result[0], result[2] = a, -b
        return result

    def edge_lines(self) -> Iterator[Tuple[Point, Point]]:
        """Yield the projected end points of every face edge."""
        for face in self.model.faces:
            size = len(face)
            for i, fv in enumerate(face):
                nxt = face[(i + 1) % size]
                yield self.project_to_2d(fv.v), self.project_to_2d(nxt.v)

    def handle_positions(self) -> List[Point]:
        """Return the projected position of every vertex handle."""
        return [self.project_to_2d(v) for v in self.model.vertices]