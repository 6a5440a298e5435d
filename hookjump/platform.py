"""The level backdrop, which cycles through its frames on a fixed beat."""

from __future__ import annotations

from typing import Sequence

from hookjump.timing import Timer

FRAMES = ("GameMap1.png", "GameMap2.png", "GameMap3.png")
FRAME_ORDER = (0, 1, 2, 1)
BLINK_INTERVAL_MS = 500
PLATFORM_SCALE = 0.4


class PlatformAnimation:
    """Steps through the backdrop frames in a repeating order."""

    def __init__(
        self,
        frames: Sequence[str] = FRAMES,
        order: Sequence[int] = FRAME_ORDER,
        interval_ms: float = BLINK_INTERVAL_MS,
    ) -> None:
        if not frames:
            raise ValueError("an animation needs at least one frame")
        if not order:
            raise ValueError("an animation needs a frame order")
        for index in order:
            if not 0 <= index < len(frames):
                raise ValueError(f"frame index out of range: {index}")
        self.frames = tuple(frames)
        self.order = tuple(order)
        self.scale = PLATFORM_SCALE
        self.current_index = 0
        self._step = 0
        self._timer = Timer(self._blink)
        self._timer.start(interval_ms)

    @property
    def current_frame(self) -> str:
        """Name of the frame shown now."""
        return self.frames[self.current_index]

    def _blink(self) -> None:
        if self._step >= len(self.order):
            self._step = 0
        self.current_index = self.order[self._step]
        self._step += 1

    def advance(self, elapsed_ms: float) -> str:
        """Let time pass and return the frame shown afterwards."""
        self._timer.advance(elapsed_ms)
        return self.current_frame