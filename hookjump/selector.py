"""Drag-to-select tool for marking rectangles on the level."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from hookjump.collision import Point

Rect = Tuple[Point, Point]


def normalize_rect(start: Point, end: Point) -> Rect:
    """Return the top-left and bottom-right corners of the box spanned by two points."""
    (x0, y0), (x1, y1) = start, end
    return (min(x0, x1), min(y0, y1)), (max(x0, x1), max(y0, y1))


class BoxSelector:
    """Tracks a mouse drag in view and scene coordinates.

    View points are used to draw the outline; scene points give the
    rectangle reported when the drag ends.
    """

    def __init__(self, on_selection: Optional[Callable[[Point, Point], None]] = None) -> None:
        self.on_selection = on_selection
        self.start: Point = (0, 0)
        self.current: Point = (0, 0)
        self.end: Point = (0, 0)
        self.scene_start: Point = (0.0, 0.0)
        self.scene_end: Point = (0.0, 0.0)
        self.selecting = False

    @property
    def outline(self) -> Optional[Rect]:
        """The rectangle to draw while dragging, or None."""
        if self.selecting and self.start != self.current:
            return self.start, self.current
        return None

    def press(self, point: Point, scene_point: Point) -> None:
        """Begin a drag at a view point and its scene position."""
        self.start = point
        self.scene_start = scene_point
        self.selecting = True

    def move(self, point: Point) -> None:
        """Follow the pointer while a drag is under way."""
        if self.selecting:
            self.current = point

    def release(self, point: Point, scene_point: Point) -> Optional[Rect]:
        """Finish the drag and return the selected scene rectangle, or None."""
        if not self.selecting:
            return None
        self.selecting = False
        self.end = point
        self.scene_end = scene_point
        rect = normalize_rect(self.scene_start, self.scene_end)
        if self.on_selection is not None:
            self.on_selection(*rect)
        return rect