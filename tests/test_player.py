import pytest

from hookjump.collision import Contact, GameManager, Side
from hookjump.player import Key, Player, PlayerEvent
from hookjump.rope import Rope


def make_player(lower=(), upper=()):
    return Player(GameManager(lower, upper), Rope())


def grounded_player():
    # Platform whose top edge touches the bottom of the start box.
    return make_player([(100.0, 7486.0)], [(300.0, 7600.0)])


def test_starting_state():
    player = make_player()
    assert (player.x, player.y) == (140.0, 3960.0)
    assert player.vx == 0.0 and player.vy == 0.0
    assert player.sprite_name() == "speed1.png"


def test_standing_on_platform_stops_falling():
    player = grounded_player()
    player.vy = 3.0
    player.update_collision()
    assert player.last_side is Side.UP
    assert player.is_fall is False
    assert player.is_jumping is False
    assert player.vy == 0.0


def test_left_contact_pushes_everything_back():
    player = make_player()
    x, box_min, rope_start = player.x, player.manager.player_min, player.rope.start
    player.vx = 2.0
    player.apply_contact(Contact(Side.LEFT, 7.0))
    assert player.vx == 0.0
    assert player.x == x - 7.0
    assert player.manager.player_min[0] == box_min[0] - 7.0
    assert player.rope.start[0] == rope_start[0] - 7.0
    assert player.is_jumping is True


def test_down_contact_pushes_player_down():
    player = make_player()
    y = player.y
    player.vy = -3.0
    player.apply_contact(Contact(Side.DOWN, 4.0))
    assert player.vy == 0.0
    assert player.y == y + 4.0


def test_up_contact_ignored_during_jump_grace():
    player = make_player()
    player.ignore_up = True
    player.vy = -5.0
    player.apply_contact(Contact(Side.UP, 3.0))
    assert player.vy == -5.0
    assert player.last_side is Side.NONE


def test_jump_from_ground():
    player = grounded_player()
    player.update_collision()
    player.press(Key.SPACE)
    assert player.vy == player.jump_speed == -5.0
    assert player.is_jumping is True
    assert player.ignore_up is True
    player.press(Key.SPACE)
    assert player.vy == -5.0


def test_jump_grace_ends():
    player = grounded_player()
    player.update_collision()
    player.press(Key.SPACE)
    player.tick(50)
    assert player.ignore_up is False


def test_auto_repeat_ignored():
    player = make_player()
    player.press(Key.D, auto_repeat=True)
    assert player.is_d is False
    assert player.is_moving is False


def test_acceleration_and_clamp():
    player = make_player()
    player.press(Key.D)
    assert player.direction is Key.D
    player.tick(100)
    assert player.vx == player.ax
    player.tick(600)
    assert player.vx == player.max_vx == 4.0


def test_accelerate_left_clamps():
    player = make_player()
    player.press(Key.A)
    player.tick(800)
    assert player.vx == -player.max_vx


def test_release_stops_acceleration():
    player = make_player()
    player.press(Key.D)
    player.tick(100)
    player.release(Key.D)
    speed = player.vx
    assert player.is_moving is False
    assert player.direction is Key.UNKNOWN
    player.tick(300)
    assert player.vx == speed


def test_escape_raises_back_to_menu_once():
    player = make_player()
    player.press(Key.ESCAPE)
    assert player.drain_events() == [PlayerEvent.BACK_TO_MENU]
    assert player.drain_events() == []


def test_out_of_world_event():
    player = make_player()
    player.manager.shift_player(0.0, 500.0)
    player.update_position()
    player.update_position()
    assert player.drain_events() == [PlayerEvent.OUT_OF_WORLD]


def test_finish_line_raises_game_win():
    player = make_player()
    player.manager.shift_player(0.0, 3390.0 - player.manager.player_min[1])
    player.update_position()
    assert PlayerEvent.GAME_WIN in player.drain_events()


def test_win_area_makes_player_rise_and_restart_restores():
    player = make_player()
    min_x, min_y = player.manager.player_min
    player.manager.shift_player(1838.0 - min_x, 3660.0 - min_y)
    player.update_position()
    assert player.gravity == -0.01
    assert player.vy < 0
    player.restart()
    assert player.gravity == 0.2
    assert (player.x, player.y) == (140.0, 3960.0)
    assert player.manager.player_min == player.manager.start_min
    assert player.rope.start == player.rope.start_origin


def test_horizontal_motion_moves_box():
    player = make_player()
    player.vx = 3.0
    x, box_x = player.x, player.manager.player_min[0]
    player.update_position()
    assert player.x == x + 3.0
    assert player.manager.player_min[0] == box_x + 3.0


def test_friction_stops_small_speed_on_ground():
    player = make_player()
    player.apply_contact(Contact(Side.UP, 0.0))
    player.vx = 0.3
    player.update_position()
    assert player.vx == 0.0


def test_friction_slows_on_ground():
    player = make_player()
    player.apply_contact(Contact(Side.UP, 0.0))
    player.vx = 2.0
    player.update_position()
    assert 0 < player.vx < 2.0


def test_no_friction_in_air():
    player = make_player()
    player.apply_contact(Contact(Side.NONE))
    player.vx = 2.0
    player.update_position()
    assert player.vx == 2.0


def test_hook_launch_release_and_cooldown():
    player = make_player()
    player.aim_point = (player.rope.start[0] + 100.0, player.rope.start[1] - 100.0)
    player.press(Key.Q)
    assert player.press_q is True
    assert player.rope.is_moving is True
    assert player.sprite_name() == "speed4.png"
    player.release(Key.Q)
    assert player.press_q is False
    assert player.rope.on_cooldown is True
    assert player.sprite_name() == "speed4.png"
    player.tick(400)
    assert player.rope.on_cooldown is False
    assert player.sprite_name() == "speed1.png"


def test_hook_press_ignored_during_cooldown():
    player = make_player()
    player.rope.on_cooldown = True
    player.press(Key.Q)
    assert player.press_q is False
    assert player.rope.is_moving is False


def test_hook_catches_platform():
    player = make_player([(500.0, 500.0)], [(600.0, 600.0)])
    rope = player.rope
    rope.is_moving = True
    rope.is_col = False
    rope.vx = rope.vy = 0.0
    rope.head = (550.0, 550.0)
    player.update_position()
    assert rope.powered is True
    assert rope.tie == (550.0, 550.0)
    assert rope.hook_ready is False


def test_fly_mode_arrows_move():
    player = make_player()
    player.fly = True
    x, y = player.x, player.y
    player.press(Key.RIGHT)
    player.press(Key.UP)
    assert player.x == x + 25
    assert player.y == y - 50


def test_negative_tick_rejected():
    player = make_player()
    with pytest.raises(ValueError):
        player.tick(-1)