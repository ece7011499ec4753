"""DesignState: the drawing canvas as an explicit object with snapshot history.

Dots, lines and circles are held as tuples of frozen dataclasses, so a history
snapshot is simply the three tuples at the moment of ``commit()``. Undo and redo
move a cursor through the snapshots; committing after an undo drops the redo tail.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

from kolam.engine.stages.s1_01_dot_chaining import nearest_neighbor_order
from kolam.engine.types import Point

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#FFD700"
_MIN_STROKE = 3.0


@dataclass(frozen=True)
class Dot:
    x: float
    y: float
    color: str = DEFAULT_COLOR
    size: float = 5


@dataclass(frozen=True)
class Line:
    start: tuple[float, float]
    end: tuple[float, float]
    color: str = DEFAULT_COLOR
    width: float = 2


@dataclass(frozen=True)
class Circle:
    center: tuple[float, float]
    radius: float
    color: str = DEFAULT_COLOR
    width: float = 2


@dataclass(frozen=True)
class Snapshot:
    dots: tuple[Dot, ...] = ()
    lines: tuple[Line, ...] = ()
    circles: tuple[Circle, ...] = ()


class DesignState:
    """Canvas contents plus an undo/redo history of snapshots."""

    def __init__(self, width: float = 500.0, height: float = 500.0) -> None:
        self.width = width
        self.height = height
        self.symmetry_mode = False
        self.dots: tuple[Dot, ...] = ()
        self.lines: tuple[Line, ...] = ()
        self.circles: tuple[Circle, ...] = ()
        self._history: list[Snapshot] = []
        self._step = -1

    # --- Drawing ---

    def add_dot(self, x: float, y: float, color: str = DEFAULT_COLOR, size: float = 5) -> list[Dot]:
        """Add a dot; in symmetry mode also its three mirror images about the canvas centre."""
        added = [Dot(x, y, color, size)]
        if self.symmetry_mode:
            cx, cy = self.width / 2, self.height / 2
            mx, my = cx + (cx - x), cy + (cy - y)
            added += [Dot(mx, y, color, size), Dot(x, my, color, size), Dot(mx, my, color, size)]
        self.dots = self.dots + tuple(added)
        return added

    def remove_dot(self, index: int) -> Dot:
        if not 0 <= index < len(self.dots):
            raise IndexError(f"No dot at index {index}")
        removed = self.dots[index]
        self.dots = self.dots[:index] + self.dots[index + 1 :]
        return removed

    def add_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: str = DEFAULT_COLOR,
    ) -> Line | None:
        if math.dist(start, end) < _MIN_STROKE:
            return None
        line = Line(tuple(start), tuple(end), color)
        self.lines = self.lines + (line,)
        return line

    def add_circle(
        self,
        center: tuple[float, float],
        point: tuple[float, float],
        color: str = DEFAULT_COLOR,
    ) -> Circle | None:
        radius = math.dist(center, point)
        if radius < _MIN_STROKE:
            return None
        circle = Circle(tuple(center), radius, color)
        self.circles = self.circles + (circle,)
        return circle

    def connect_dots(self) -> tuple[Line, ...]:
        """Replace all lines with a closed nearest-neighbour loop through the dots."""
        if len(self.dots) < 2:
            raise ValueError("Add at least 2 dots to connect")
        order = nearest_neighbor_order([Point(d.x, d.y) for d in self.dots])
        chain = [self.dots[i] for i in order]
        self.lines = tuple(
            Line((cur.x, cur.y), (nxt.x, nxt.y), cur.color)
            for cur, nxt in zip(chain, chain[1:] + chain[:1])
        )
        self.commit()
        return self.lines

    def clear(self) -> None:
        self.dots, self.lines, self.circles = (), (), ()
        self._history = []
        self._step = -1

    # --- History ---

    def commit(self) -> None:
        """Snapshot the current contents, discarding any redo tail."""
        self._step += 1
        self._history = self._history[: self._step]
        self._history.append(Snapshot(self.dots, self.lines, self.circles))

    def undo(self) -> bool:
        if self._step <= 0:
            return False
        self._step -= 1
        self._restore()
        return True

    def redo(self) -> bool:
        if self._step >= len(self._history) - 1:
            return False
        self._step += 1
        self._restore()
        return True

    @property
    def can_undo(self) -> bool:
        return self._step > 0

    @property
    def can_redo(self) -> bool:
        return self._step < len(self._history) - 1

    def _restore(self) -> None:
        snap = self._history[self._step]
        self.dots, self.lines, self.circles = snap.dots, snap.lines, snap.circles
        logger.debug("Restored snapshot %d/%d", self._step + 1, len(self._history))

    # --- Export ---

    def stats(self) -> dict[str, int]:
        complexity = min((len(self.dots) / 50 + len(self.lines) / 100) * 100, 100)
        return {
            "dotCount": len(self.dots),
            "lineCount": len(self.lines),
            "complexity": round(complexity),
        }

    def to_design(self, name: str | None = None) -> dict:
        """Payload for ``POST /api/designs``."""
        payload = {
            "dots": [asdict(d) for d in self.dots],
            "lines": [
                {
                    "start": {"x": ln.start[0], "y": ln.start[1]},
                    "end": {"x": ln.end[0], "y": ln.end[1]},
                    "color": ln.color,
                    "width": ln.width,
                }
                for ln in self.lines
            ],
            "circles": [
                {
                    "center": {"x": c.center[0], "y": c.center[1]},
                    "radius": c.radius,
                    "color": c.color,
                    "width": c.width,
                }
                for c in self.circles
            ],
        }
        if name:
            payload["name"] = name
        return payload
