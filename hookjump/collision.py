"""Axis-aligned collision between the player box and the level's platforms."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Iterable, List, Optional, Sequence, Tuple, Union

log = logging.getLogger(__name__)

Point = Tuple[float, float]

PLAYER_START_MIN: Point = (153.0, 7453.0)
PLAYER_START_MAX: Point = (186.0, 7486.0)
OUT_OF_WORLD_MIN: Point = (-10000.0, 7900.0)
OUT_OF_WORLD_MAX: Point = (10000.0, 8100.0)
WIN_AREA_MIN: Point = (1838.0, 3652.0)
WIN_AREA_MAX: Point = (1921.0, 3701.0)
FINISH_LINE_MIN: Point = (-10000.0, 3400.0)
FINISH_LINE_MAX: Point = (10000.0, 3500.0)


class Side(Enum):
    """Which way the player must be pushed out of a platform."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    NONE = "none"


@dataclass(frozen=True)
class Contact:
    """The result of a collision test: a push direction and its distance."""

    side: Side
    overlap: float = 0.0

    @property
    def collided(self) -> bool:
        return self.side is not Side.NONE


def overlaps(a_min: Point, a_max: Point, b_min: Point, b_max: Point) -> bool:
    """True when two boxes intersect; touching edges count."""
    return (
        a_min[0] <= b_max[0]
        and a_max[0] >= b_min[0]
        and a_min[1] <= b_max[1]
        and a_max[1] >= b_min[1]
    )


def parse_points(text: str) -> List[Point]:
    """Read points from the second line of a corner file.

    The first line holds a count and is ignored. The second line holds
    space-separated coordinates taken in x, y pairs; an unpaired trailing
    value is ignored and pairs that are not numbers are skipped.
    """
    lines = text.splitlines()
    data = lines[1] if len(lines) > 1 else ""
    tokens = data.split(" ")
    points: List[Point] = []
    for x_text, y_text in zip(tokens[0::2], tokens[1::2]):
        try:
            points.append((float(x_text), float(y_text)))
        except ValueError:
            log.warning("invalid coordinate pair: %r %r", x_text, y_text)
    return points


def load_points(path: Union[str, "PathLike[str]"]) -> List[Point]:
    """Read the corner points stored in a file."""
    with open(path, encoding="utf-8") as handle:
        return parse_points(handle.read())


class GameManager:
    """Holds the player's collision box and tests it against the level."""

    def __init__(
        self,
        lower_corners: Optional[Iterable[Point]] = None,
        upper_corners: Optional[Iterable[Point]] = None,
    ) -> None:
        self.player_min: Point = PLAYER_START_MIN
        self.player_max: Point = PLAYER_START_MAX
        self.start_min: Point = PLAYER_START_MIN
        self.start_max: Point = PLAYER_START_MAX
        self.lower_corners: List[Point] = list(lower_corners or ())
        self.upper_corners: List[Point] = list(upper_corners or ())
        self.out_min, self.out_max = OUT_OF_WORLD_MIN, OUT_OF_WORLD_MAX
        self.win_min, self.win_max = WIN_AREA_MIN, WIN_AREA_MAX
        self.finish_min, self.finish_max = FINISH_LINE_MIN, FINISH_LINE_MAX
        self.is_game_over = False
        self.is_win = False

    def load_platforms(self, lower_path, upper_path) -> None:
        """Replace the platforms with the corners read from two files."""
        self.lower_corners = load_points(lower_path)
        self.upper_corners = load_points(upper_path)

    def classify(self, player_min: Point, player_max: Point) -> Contact:
        """Find the first platform the box hits and the shortest way out."""
        for plat_min, plat_max in zip(self.lower_corners, self.upper_corners):
            if not overlaps(player_min, player_max, plat_min, plat_max):
                continue
            overlap_left = plat_max[0] - player_min[0]
            overlap_right = player_max[0] - plat_min[0]
            overlap_top = plat_max[1] - player_min[1]
            overlap_bottom = player_max[1] - plat_min[1]
            if min(overlap_left, overlap_right) < min(overlap_top, overlap_bottom):
                if overlap_left > overlap_right:
                    return Contact(Side.LEFT, overlap_right)
                return Contact(Side.RIGHT, overlap_left)
            if overlap_top > overlap_bottom:
                return Contact(Side.UP, overlap_bottom)
            return Contact(Side.DOWN, overlap_top)
        return Contact(Side.NONE)

    def check(self) -> Contact:
        """Classify the current player box."""
        return self.classify(self.player_min, self.player_max)

    def shift_player(self, dx: float, dy: float) -> None:
        """Move the player's collision box."""
        self.player_min = (self.player_min[0] + dx, self.player_min[1] + dy)
        self.player_max = (self.player_max[0] + dx, self.player_max[1] + dy)

    def is_out_of_world(self) -> bool:
        """True when the player has fallen into the kill zone."""
        return overlaps(self.player_min, self.player_max, self.out_min, self.out_max)

    def has_won(self) -> bool:
        """True when the player touches the goal area."""
        return overlaps(self.player_min, self.player_max, self.win_min, self.win_max)

    def reached_finish(self) -> bool:
        """True when the player's box spans the finish line's height."""
        line: Sequence[float] = self.finish_min
        return self.player_min[1] <= line[1] <= self.player_max[1]

    def reset_player(self) -> None:
        """Put the player's box back where the game starts."""
        self.player_min = self.start_min
        self.player_max = self.start_max