"""The player character: input, movement, collision response and the hook."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from hookjump.collision import Contact, GameManager, Point, Side
from hookjump.rope import Rope
from hookjump.timing import Timer

MOVE_INTERVAL_MS = 16
COLLISION_INTERVAL_MS = 12
ACCELERATION_INTERVAL_MS = 100
JUMP_GRACE_MS = 50

VIEW_WIDTH = 800
VIEW_HEIGHT = 600
CAMERA_LIFT = 40
FLY_STEP_X = 25
FLY_STEP_Y = 50
ROPE_SCREEN_MAX_X = 423
ROPE_SCREEN_MAX_Y = 3844

SPRITE_READY = "speed1.png"
SPRITE_BUSY = "speed4.png"


class Key(Enum):
    """Keys the player reacts to."""

    A = "a"
    D = "d"
    SPACE = "space"
    Q = "q"
    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


class PlayerEvent(Enum):
    """Things the player asks the rest of the game to handle."""

    BACK_TO_MENU = "back_to_menu"
    OUT_OF_WORLD = "out_of_world"
    GAME_WIN = "game_win"


class Player:
    """Physics and input state of the character, driven by simulated time."""

    def __init__(
        self, manager: Optional[GameManager] = None, rope: Optional[Rope] = None
    ) -> None:
        self.manager = manager if manager is not None else GameManager()
        self.rope = rope if rope is not None else Rope()

        self.vx = 0.0
        self.vy = 0.0
        self.ax = 1.0
        self.ay = 1.0
        self.gravity = 0.2
        self.start_gravity = self.gravity
        self.jump_speed = -5.0
        self.friction = 0.5
        self.max_vx = 4.0
        self.max_vy = 5.0

        self.x = 140.0
        self.y = 3960.0
        self.start_x = self.x
        self.start_y = self.y
        self.fly = False

        self.is_jumping = False
        self.is_moving = False
        self.is_fall = True
        self.is_a = False
        self.is_d = False
        self.is_space = False
        self.press_q = False
        self.ignore_up = False
        self.direction = Key.UNKNOWN
        self.last_side = Side.NONE

        self.aim_point: Point = (0.0, 0.0)
        self.camera: Point = (self.x, self.y - CAMERA_LIFT)

        self._events: List[PlayerEvent] = []

        self.move_timer = Timer(self.update_position)
        self.collision_timer = Timer(self.update_collision)
        self.acceleration_timer = Timer(self._accelerate)
        self.jump_timer = Timer(self._end_jump_grace)
        self.rope_accel_timer = Timer(self._rope_accelerate)
        self.move_timer.start(MOVE_INTERVAL_MS)
        self.collision_timer.start(COLLISION_INTERVAL_MS)

    # --- timer callbacks -------------------------------------------------

    def _accelerate(self) -> None:
        if self.is_moving and self.is_a:
            self.vx = max(self.vx - self.ax, -self.max_vx)
        if self.is_moving and self.is_d:
            self.vx = min(self.vx + self.ax, self.max_vx)

    def _rope_accelerate(self) -> None:
        if self.rope.powered:
            self.vx += self.rope.ax
            self.vy += self.rope.ay

    def _end_jump_grace(self) -> None:
        self.ignore_up = False
        self.jump_timer.stop()

    # --- helpers ---------------------------------------------------------

    def _move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy
        self.manager.shift_player(dx, dy)
        self.rope.shift_start(dx, dy)

    def _emit(self, event: PlayerEvent) -> None:
        if event not in self._events:
            self._events.append(event)

    def _timers(self) -> List[Timer]:
        return [
            self.collision_timer,
            self.move_timer,
            self.acceleration_timer,
            self.jump_timer,
            self.rope_accel_timer,
            self.rope.gravity_timer,
            self.rope.flight_timer,
            self.rope.launch_delay_timer,
            self.rope.cooldown_timer,
        ]

    # --- collision -------------------------------------------------------

    def apply_contact(self, contact: Contact) -> None:
        """React to a collision result by stopping and pushing the player out."""
        side, overlap = contact.side, contact.overlap
        if side is Side.UP:
            if self.ignore_up:
                return
            self.vy = 0.0
            self.is_fall = False
            self.is_jumping = False
            self._move(0.0, -overlap)
        else:
            self.is_fall = True
            self.is_jumping = True
            if side is Side.LEFT:
                self.vx = 0.0
                self._move(-overlap, 0.0)
            elif side is Side.RIGHT:
                self.vx = 0.0
                self._move(overlap, 0.0)
            elif side is Side.DOWN:
                self.vy = 0.0
                self._move(0.0, overlap)
        self.last_side = side

    def update_collision(self) -> None:
        """Test the player against the platforms and respond."""
        self.apply_contact(self.manager.check())

    # --- input -----------------------------------------------------------

    def press(self, key: Key, auto_repeat: bool = False) -> None:
        """Handle a key going down."""
        self.update_collision()

        if key is Key.ESCAPE:
            if auto_repeat:
                return
            self._emit(PlayerEvent.BACK_TO_MENU)

        if key is Key.Q:
            if auto_repeat or self.rope.on_cooldown:
                return
            self.press_q = True
            self.rope.has_line = True
            self.rope.aim(self.rope.start, self.aim_point)
            self.rope.launch()
            self.rope_accel_timer.start(self.rope.accel_interval_ms)

        if key in (Key.A, Key.D, Key.SPACE):
            if auto_repeat:
                return
            if key is Key.A:
                self.is_a = True
                self.is_moving = True
            elif key is Key.D:
                self.is_d = True
                self.is_moving = True
            else:
                self.is_space = True
            self.direction = key
            if key is Key.SPACE and not self.is_jumping:
                self.update_collision()
                self.vy += self.jump_speed
                self.is_fall = True
                self.is_jumping = True
                self.ignore_up = True
                self.jump_timer.start(JUMP_GRACE_MS)
            self.acceleration_timer.start(ACCELERATION_INTERVAL_MS)

        if self.fly:
            steps = {
                Key.LEFT: (-FLY_STEP_X, 0),
                Key.RIGHT: (FLY_STEP_X, 0),
                Key.UP: (0, -FLY_STEP_Y),
                Key.DOWN: (0, FLY_STEP_Y),
            }
            if key in steps:
                self._move(*steps[key])

    def release(self, key: Key, auto_repeat: bool = False) -> None:
        """Handle a key going up."""
        self.update_collision()
        if key in (Key.A, Key.D):
            if auto_repeat:
                return
            if key is Key.A:
                self.is_a = False
            else:
                self.is_d = False
            self.is_moving = False
            self.acceleration_timer.stop()
            self.direction = Key.UNKNOWN

        if key is Key.Q:
            if auto_repeat:
                return
            if self.press_q:
                self.rope.release()
            else:
                self.rope.is_moving = False
                self.rope.has_line = False
                self.rope.powered = False
            self.rope_accel_timer.stop()
            self.press_q = False

    # --- simulation ------------------------------------------------------

    def _apply_friction(self) -> bool:
        if self.last_side is not Side.UP:
            return False
        if not self.is_moving:
            return True
        return (self.direction is Key.A and self.vx > 0) or (
            self.direction is Key.D and self.vx < 0
        )

    def update_position(self) -> None:
        """Advance the character and its hook by one frame."""
        if self.manager.is_out_of_world():
            self._emit(PlayerEvent.OUT_OF_WORLD)
        if self.manager.has_won():
            self.vy = -0.8
            self.gravity = -0.01
        if self.manager.reached_finish():
            self._emit(PlayerEvent.GAME_WIN)

        if self.is_fall and not self.fly:
            self.vy += self.gravity

        if self.vx != 0:
            self._move(self.vx, 0.0)
            if self._apply_friction():
                if -self.friction < self.vx < self.friction:
                    self.vx = 0.0
                if self.vx > 0:
                    self.vx -= self.friction
                elif self.vx < 0:
                    self.vx += self.friction

        if self.vy != 0:
            self._move(0.0, self.vy)

        self.camera = (self.x, self.y - CAMERA_LIFT)
        rope = self.rope
        start_x, start_y = rope.start
        rope.screen_start = (
            min(start_x, ROPE_SCREEN_MAX_X),
            start_y if start_y <= ROPE_SCREEN_MAX_Y else ROPE_SCREEN_MAX_Y,
        )

        if not rope.is_col and rope.is_moving:
            rope.head = (rope.head[0] + rope.vx, rope.head[1] + rope.vy)

        view_left = self.camera[0] - VIEW_WIDTH / 2
        view_top = self.camera[1] - VIEW_HEIGHT / 2
        rope.screen_end = (rope.head[0] - view_left, rope.head[1] - view_top)

        rope.check_hook(self.manager.lower_corners, self.manager.upper_corners)
        if rope.hook_ready:
            rope.hook_ready = False
            rope.powered = True
            rope.tie = rope.head
        if not rope.is_col:
            rope.tie = rope.start
        if not rope.is_moving:
            rope.head = rope.start
            rope.is_col = False
        rope.aim_pull(rope.start, rope.tie)
        rope.give_power()

    def tick(self, elapsed_ms: float) -> None:
        """Let time pass, firing every timer in the order its timeouts fall."""
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time must not be negative: {elapsed_ms}")
        remaining = float(elapsed_ms)
        while remaining > 0:
            pending = [
                left
                for left in (timer.remaining_ms for timer in self._timers())
                if left is not None and left > 0
            ]
            step = min([remaining, *pending])
            for timer in self._timers():
                timer.advance(step)
            remaining -= step

    def restart(self) -> None:
        """Put the player, its collision box and the hook back at the start."""
        self.vx = 0.0
        self.vy = 0.0
        self.gravity = self.start_gravity
        self.x = self.start_x
        self.y = self.start_y
        self.manager.reset_player()
        self.rope.reset()

    def sprite_name(self) -> str:
        """The sprite to draw: the busy one while the hook is out or cooling."""
        if self.rope.on_cooldown or self.rope.has_line or self.press_q:
            return SPRITE_BUSY
        return SPRITE_READY

    def drain_events(self) -> List[PlayerEvent]:
        """Return the events raised since the last call and forget them."""
        events, self._events = self._events, []
        return events