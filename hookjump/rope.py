"""The grappling hook: its flight, hooking and the pull it gives."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from hookjump.collision import Point
from hookjump.timing import Timer

GRAVITY_INTERVAL_MS = 16
LAUNCH_DELAY_MS = 100
COOLDOWN_MS = 400


def quadrant(origin: Point, target: Point) -> Optional[Tuple[int, float]]:
    """Return the screen quadrant of target around origin and its slope.

    Quadrants are 1 (up-right), 2 (up-left), 3 (down-left) and 4
    (down-right), with y growing downwards. The slope is the tangent of
    the angle to the horizontal. None when target is straight above or
    below origin.
    """
    ox, oy = origin
    tx, ty = target
    if ty <= oy and tx > ox:
        return 1, (oy - ty) / (tx - ox)
    if ty <= oy and tx < ox:
        return 2, (oy - ty) / (ox - tx)
    if ty >= oy and tx < ox:
        return 3, (ty - oy) / (ox - tx)
    if ty >= oy and tx > ox:
        return 4, (ty - oy) / (tx - ox)
    return None


def _split(magnitude: float, tangent: float, direction: Optional[int]) -> Point:
    """Split a magnitude into x and y along a quadrant and slope."""
    if direction == 0:
        return 0.0, -magnitude
    along = math.sqrt(magnitude * magnitude / (1 + tangent * tangent))
    if direction == 1:
        return along, -along * tangent
    if direction == 2:
        return -along, -along * tangent
    if direction == 3:
        return -along, along * tangent
    return along, along * tangent


class Rope:
    """State of the hook: where it was thrown, where it is, and its pull."""

    def __init__(self) -> None:
        self.start: Point = (170.0, 7473.0)
        self.start_origin: Point = self.start
        self.target: Point = (0.0, 0.0)
        self.head: Point = (170.0, 7473.0)
        self.tie: Point = (0.0, 0.0)
        self.screen_start: Point = (170.0, 3844.0)
        self.screen_end: Point = (0.0, 0.0)

        self.tan_x = 0.0
        self.direction: Optional[int] = None
        self.max_time_ms = 1400.0
        self.gravity = 0.09
        self.pull = 1.6
        self.speed = 6.6
        self.vx = 0.0
        self.vy = 0.0

        self.tan_ax = 0.0
        self.pull_direction: Optional[int] = None
        self.ax = 0.0
        self.ay = 0.0
        self.power_time_ms = 2000.0
        self.accel_interval_ms = 50.0

        self.can_launch = True
        self.hook_ready = False
        self.has_line = False
        self.is_moving = False
        self.is_col = False
        self.on_cooldown = False
        self.powered = False

        self.flight_timer = Timer(self._end_flight)
        self.gravity_timer = Timer(self._fall)
        self.launch_delay_timer = Timer(self._allow_launch)
        self.cooldown_timer = Timer(self._end_cooldown)
        self.gravity_timer.start(GRAVITY_INTERVAL_MS)

    def _end_flight(self) -> None:
        self.has_line = False
        self.is_moving = False
        self.flight_timer.stop()

    def _fall(self) -> None:
        if self.is_moving:
            self.vy += self.gravity

    def _allow_launch(self) -> None:
        self.can_launch = True
        self.launch_delay_timer.stop()

    def _end_cooldown(self) -> None:
        self.on_cooldown = False
        self.cooldown_timer.stop()

    def aim(self, start: Point, target: Point) -> None:
        """Set the throw direction from start towards target."""
        self.target = target
        found = quadrant(start, target)
        if found is not None:
            self.direction, self.tan_x = found

    def launch(self) -> bool:
        """Throw the hook along the aimed direction; False if it cannot be thrown."""
        if not self.can_launch or self.on_cooldown:
            return False
        self.vx, self.vy = _split(self.speed, self.tan_x, self.direction)
        self.is_moving = True
        self.flight_timer.start(self.max_time_ms)
        self.launch_delay_timer.start(LAUNCH_DELAY_MS)
        self.can_launch = False
        return True

    def check_hook(
        self, lower_corners: Iterable[Point], upper_corners: Iterable[Point]
    ) -> bool:
        """Mark the hook as caught when its head lies inside any platform."""
        hx, hy = self.head
        for (x0, y0), (x1, y1) in zip(lower_corners, upper_corners):
            if x0 <= hx <= x1 and y0 <= hy <= y1:
                self.hook_ready = True
                self.is_col = True
        return self.hook_ready

    def aim_pull(self, start: Point, tie: Point) -> None:
        """Set the direction the line pulls the player, from start towards tie."""
        found = quadrant(start, tie)
        if found is not None:
            self.pull_direction, self.tan_ax = found
        elif tie == start:
            self.pull_direction = 5

    def give_power(self) -> None:
        """Set the pull's x and y components from the pull direction."""
        if self.pull_direction is None:
            return
        if self.pull_direction == 5:
            self.ax, self.ay = 0.0, 0.0
            return
        self.ax, self.ay = _split(self.pull, self.tan_ax, self.pull_direction)

    def tick(self, elapsed_ms: float) -> None:
        """Let time pass for the hook's timers."""
        self.gravity_timer.advance(elapsed_ms)
        self.flight_timer.advance(elapsed_ms)
        self.launch_delay_timer.advance(elapsed_ms)
        self.cooldown_timer.advance(elapsed_ms)

    def release(self) -> None:
        """Let go of the line and start the cooldown if it is not running."""
        self.is_moving = False
        self.has_line = False
        self.powered = False
        if not self.on_cooldown:
            self.on_cooldown = True
            self.cooldown_timer.start(COOLDOWN_MS)

    def shift_start(self, dx: float, dy: float) -> None:
        """Move the line's anchor on the player."""
        self.start = (self.start[0] + dx, self.start[1] + dy)

    def reset(self) -> None:
        """Put the line's anchor back where the game starts."""
        self.start = self.start_origin