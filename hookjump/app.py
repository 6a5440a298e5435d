"""Screens of the game and the window that runs them."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from hookjump.collision import GameManager
from hookjump.player import SPRITE_BUSY, Key, Player, PlayerEvent
from hookjump.rope import Rope
from hookjump.timing import Timer

WIN_SCENE_MS = 9000
FAREWELL_SCENE_MS = 8600
WIN_START = (180.0, 560.0)
FAREWELL_START = (125.0, 490.0)


class Screen(Enum):
    """The window currently shown."""

    MENU = "menu"
    INSTRUCTIONS = "instructions"
    GAME = "game"
    WIN = "win"
    FAREWELL = "farewell"


WINDOWS = {
    Screen.MENU: ("主菜单", (250, 476)),
    Screen.INSTRUCTIONS: ("游戏说明", (259, 400)),
    Screen.GAME: (" : ' Just Do it ... '", (800, 600)),
    Screen.WIN: ("(*^▽^*)", (366, 543)),
    Screen.FAREWELL: ("See you later...", (250, 476)),
}


class GameFlow:
    """Moves between the menu, the game and the closing scenes."""

    def __init__(
        self,
        player: Optional[Player] = None,
        ask_retry: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.player = player if player is not None else Player()
        self.ask_retry = ask_retry if ask_retry is not None else (lambda: True)
        self.screen = Screen.MENU
        self.running = True
        self.game_opened = False
        self.win_timer = Timer(self._to_farewell)
        self.again_timer = Timer(self._play_again)

    def start_game(self) -> None:
        """Leave the menu for the game."""
        self.screen = Screen.GAME
        self.game_opened = True

    def show_instructions(self) -> None:
        """Leave the menu for the instructions."""
        self.screen = Screen.INSTRUCTIONS

    def back_to_menu(self) -> None:
        """Return to the main menu."""
        self.screen = Screen.MENU

    def quit(self) -> None:
        """Stop the application."""
        self.running = False

    def _to_farewell(self) -> None:
        self.win_timer.stop()
        self.screen = Screen.FAREWELL
        self.again_timer.start(FAREWELL_SCENE_MS)
        self.player.x, self.player.y = FAREWELL_START

    def _play_again(self) -> None:
        self.again_timer.stop()
        self.player.restart()
        self.back_to_menu()

    def _win(self) -> None:
        self.screen = Screen.WIN
        self.win_timer.start(WIN_SCENE_MS)
        self.player.gravity = 0.0
        self.player.vy = -1.0
        self.player.x, self.player.y = WIN_START

    def handle_player_events(self, events: Iterable[PlayerEvent]) -> None:
        """React to what the player asked for."""
        for event in events:
            if event is PlayerEvent.BACK_TO_MENU:
                self.back_to_menu()
            elif event is PlayerEvent.OUT_OF_WORLD:
                retry = self.ask_retry()
                self.player.restart()
                if not retry:
                    self.back_to_menu()
            elif event is PlayerEvent.GAME_WIN:
                self._win()

    def tick(self, elapsed_ms: float) -> None:
        """Let time pass for the scenes and the player."""
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time must not be negative: {elapsed_ms}")
        self.again_timer.advance(elapsed_ms)
        self.win_timer.advance(elapsed_ms)
        self.player.tick(elapsed_ms)
        self.handle_player_events(self.player.drain_events())


INSTRUCTIONS = (
    "A / D : move",
    "Space : jump",
    "Q : throw the hook at the mouse",
    "Esc : back to the menu",
)


def _player_keys(pygame):
    return {
        pygame.K_a: Key.A,
        pygame.K_d: Key.D,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_q: Key.Q,
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
    }


def _view_origin(player: Player, size):
    pmin, pmax = player.manager.player_min, player.manager.player_max
    cx = (pmin[0] + pmax[0]) / 2
    cy = (pmin[1] + pmax[1]) / 2 - 40
    return cx - size[0] / 2, cy - size[1] / 2


def _draw_lines(surface, font, lines: Sequence[str], top: int = 40) -> None:
    for row, text in enumerate(lines):
        image = font.render(text, True, (240, 240, 240))
        surface.blit(image, (20, top + row * 32))


def _ask_retry(pygame, surface, font) -> bool:
    surface.fill((20, 20, 30))
    _draw_lines(surface, font, ("Game Over :D", "Play again? [Y/n]"))
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_y, pygame.K_RETURN):
                return True
            if event.key in (pygame.K_n, pygame.K_ESCAPE):
                return False


def _draw_game(pygame, surface, player: Player) -> None:
    size = surface.get_size()
    left, top = _view_origin(player, size)
    surface.fill((30, 34, 48))
    manager = player.manager
    for (x0, y0), (x1, y1) in zip(manager.lower_corners, manager.upper_corners):
        rect = pygame.Rect(int(x0 - left), int(y0 - top), int(x1 - x0), int(y1 - y0))
        if rect.colliderect(surface.get_rect()):
            pygame.draw.rect(surface, (90, 120, 90), rect)
    rope = player.rope
    if rope.has_line or rope.is_moving:
        start = (rope.start[0] - left, rope.start[1] - top)
        head = (rope.head[0] - left, rope.head[1] - top)
        pygame.draw.line(surface, (210, 145, 50), start, head, 4)
    (x0, y0), (x1, y1) = manager.player_min, manager.player_max
    colour = (230, 140, 40) if player.sprite_name() == SPRITE_BUSY else (70, 150, 230)
    pygame.draw.rect(
        surface, colour, pygame.Rect(int(x0 - left), int(y0 - top), int(x1 - x0), int(y1 - y0))
    )


def _draw(pygame, surface, font, flow: GameFlow) -> None:
    if flow.screen is Screen.GAME:
        _draw_game(pygame, surface, flow.player)
        return
    surface.fill((20, 20, 30))
    if flow.screen is Screen.MENU:
        _draw_lines(surface, font, ("Enter : start", "I : instructions", "Esc : quit"))
    elif flow.screen is Screen.INSTRUCTIONS:
        _draw_lines(surface, font, INSTRUCTIONS)
    else:
        player = flow.player
        pygame.draw.rect(
            surface, (70, 150, 230), pygame.Rect(int(player.x), int(player.y), 17, 17)
        )


def _key_down(pygame, flow: GameFlow, key: int, keys) -> None:
    if flow.screen is Screen.GAME:
        if key in keys:
            flow.player.press(keys[key])
    elif flow.screen is Screen.MENU:
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            flow.start_game()
        elif key == pygame.K_i:
            flow.show_instructions()
        elif key == pygame.K_ESCAPE:
            flow.quit()
    elif flow.screen is Screen.INSTRUCTIONS and key == pygame.K_ESCAPE:
        flow.back_to_menu()


def main(argv=None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="hookjump", description="A grappling-hook platformer.")
    parser.add_argument("lower", help="file with the platforms' top-left corners")
    parser.add_argument("upper", help="file with the platforms' bottom-right corners")
    parser.add_argument("--fps", type=int, default=60, help="frames per second")
    args = parser.parse_args(argv)

    manager = GameManager()
    manager.load_platforms(args.lower, args.upper)

    import pygame

    pygame.init()
    try:
        title, size = WINDOWS[Screen.MENU]
        surface = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        font = pygame.font.Font(None, 28)
        clock = pygame.time.Clock()
        keys = _player_keys(pygame)
        shown = Screen.MENU

        def ask() -> bool:
            return _ask_retry(pygame, pygame.display.get_surface(), font)

        flow = GameFlow(Player(manager, Rope()), ask_retry=ask)
        while flow.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    flow.quit()
                elif event.type == pygame.KEYDOWN:
                    _key_down(pygame, flow, event.key, keys)
                elif event.type == pygame.KEYUP and event.key in keys:
                    flow.player.release(keys[event.key])
            if flow.screen is Screen.GAME:
                left, top = _view_origin(flow.player, surface.get_size())
                mx, my = pygame.mouse.get_pos()
                flow.player.aim_point = (left + mx, top + my)
            flow.tick(clock.tick(args.fps))
            if flow.screen is not shown:
                shown = flow.screen
                title, size = WINDOWS[shown]
                surface = pygame.display.set_mode(size)
                pygame.display.set_caption(title)
            _draw(pygame, surface, font, flow)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0