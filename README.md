# hookjump

A small side-scrolling platformer. You start at the foot of a tall tower
and work your way up by running, jumping and swinging on a grappling hook.
Fall out of the world and you are asked whether to play again; touch the
goal and the character floats up to the finish line, two short closing
scenes follow, and the game returns to the main menu.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and reads the keyboard and
mouse.

## Playing

The level is read from two corner files, one holding the top-left corner
of every platform and one holding the matching bottom-right corners:

```
hookjump LOWER UPPER [--fps N]
```

- `LOWER` – file with the platforms' top-left corners
- `UPPER` – file with the platforms' bottom-right corners
- `--fps` – frames per second (default 60)

Each corner file has a first line that is ignored (it conventionally holds
the number of points) and a second line of space-separated numbers taken
as `x y` pairs. A trailing unpaired number is ignored and pairs that are
not numbers are skipped. The n-th point of one file pairs with the n-th
point of the other.

Main menu: **Enter** starts the game, **I** shows the instructions,
**Esc** quits. Esc leaves the instructions screen.

Controls in the game:

| Key    | Action                                                        |
|--------|---------------------------------------------------------------|
| A / D  | Run left / right; holding the key builds up speed to a cap    |
| Space  | Jump (only while standing on a platform)                      |
| Q      | Throw the hook towards the mouse pointer; hold to be pulled towards the point where it catches, release to let go |
| Escape | Back to the main menu                                         |

The hook flies along a falling arc and only catches if its head lands
inside a platform before its flight time runs out. After letting go of Q
the hook needs a short moment to recharge; the character changes colour
while the hook is out or recharging. On firm ground, friction slows the
character unless you keep running the way you are already moving.

When you fall out of the world the window asks "Play again? [Y/n]": Y or
Enter restarts the run, N or Esc restarts it and returns to the menu.

## Using the pieces

The game logic is plain Python and can be driven without a window:

- `hookjump.collision` – `GameManager` holds the player's box and the
  platforms (`load_platforms`), classifies contacts (`classify`, `check`)
  as a `Contact` with a `Side`, and tells whether the player has left the
  world (`is_out_of_world`), touched the goal (`has_won`) or reached the
  finish line (`reached_finish`). `parse_points`, `load_points` and
  `overlaps` are available on their own.
- `hookjump.rope` – `Rope` aims (`aim`), launches (`launch`), hooks
  (`check_hook`) and lets go (`release`) of the line and works out its
  pull (`aim_pull`, `give_power`); `quadrant` gives the direction and slope
  between two points.
- `hookjump.player` – `Player` takes key presses (`press`, `release`) as
  `Key` values, advances its physics (`tick`, `update_position`,
  `update_collision`), restarts (`restart`) and reports what happened
  through `drain_events` as `PlayerEvent` values.
- `hookjump.timing` – `Timer`, a repeating millisecond timer advanced by
  hand (`start`, `stop`, `advance`).
- `hookjump.platform` – `PlatformAnimation`, which cycles backdrop frame
  names on a fixed beat.
- `hookjump.selector` – `BoxSelector` and `normalize_rect`, for dragging
  out rectangles in view and scene coordinates.
- `hookjump.app` – `GameFlow`, moving between the `Screen`s (menu,
  instructions, game, win and farewell scenes), and `main`, which runs the
  window.

## What it does not do

- No level ships with the package; you supply the two corner files.
- The window draws platforms, the player and the line as plain shapes;
  there are no images, backdrop or sound. `PlatformAnimation` and
  `BoxSelector` are not used by the window.
- The player's `fly` mode (arrow keys move it freely) can only be switched
  on from code.

## Running the tests

```
pip install .[test]
pytest
```