import pytest

from dorga.geometry import Vec2
from dorga.player import (
    FIRE_TEXTURES,
    HITBOX_RADIUS,
    MAX_PLAYER_SPEED,
    PLAYER_DEAD_MIN_SPEED,
    Player,
)
from dorga.state import GameState


def _thrust(player, frames, dt=0.016):
    for _ in range(frames):
        player.update(GameState.PLAYING, True, dt)


def test_new_player_at_rest_pointing_up():
    player = Player()
    assert player.position == Vec2(0, 0)
    assert player.velocity == Vec2(0, 0)
    assert player.rotation == 90.0
    assert player.fire_frame() is None


def test_radius_is_hitbox():
    assert Player().radius() == HITBOX_RADIUS


def test_main_menu_keeps_player_still():
    player = Player()
    player.update(GameState.MAIN_MENU, True, 0.5)
    assert player.position == Vec2(0, 0)
    assert player.fire_frame() is None


def test_thrust_moves_up_the_screen():
    player = Player()
    _thrust(player, 10)
    assert player.position.y < 0
    assert player.position.x == pytest.approx(0.0, abs=1e-9)
    assert player.rotation == 90.0
    assert player.main_position == player.position


def test_coasting_rotates_without_moving_from_rest():
    player = Player()
    player.update(GameState.PLAYING, False, 0.05)
    assert player.rotation < 90.0
    assert player.position == Vec2(0, 0)
    assert player.velocity == Vec2(0, 0)


def test_speed_never_exceeds_maximum():
    player = Player()
    for _ in range(500):
        player.update(GameState.PLAYING, True, 0.016)
        assert player.velocity.length() <= MAX_PLAYER_SPEED + 1e-6


def test_deceleration_brings_rocket_to_rest():
    player = Player()
    _thrust(player, 20)
    for _ in range(2000):
        player.update(GameState.PLAYING, False, 0.016)
    assert player.velocity == Vec2(0, 0)


def test_fire_frames_start_cycle_and_stop():
    player = Player()
    player.update(GameState.PLAYING, True, 0.01)
    assert player.fire_frame() == 0
    for _ in range(300):
        player.update(GameState.PLAYING, True, 0.016)
        frame = player.fire_frame()
        assert frame is not None and 0 <= frame < FIRE_TEXTURES
    for _ in range(100):
        player.update(GameState.PLAYING, False, 0.016)
    assert player.fire_frame() is None


def test_kill_remembers_position():
    player = Player()
    _thrust(player, 30)
    player.kill()
    assert player.dead_position == player.position


def test_debris_spreads_and_slows():
    player = Player()
    _thrust(player, 30)
    player.kill()
    start = player.position
    player.update(GameState.PLAYER_DEAD, False, 0.1)
    assert player.fire_frame() is None
    assert player.main_position == player.window_position
    assert player.main_position != start
    assert player.top_position != player.main_position
    assert player.propeller_000_position != player.propeller_001_position
    assert player.position == start
    for _ in range(200):
        player.update(GameState.PLAYER_DEAD, False, 0.1)
    assert player.debris_speed_multiplier == PLAYER_DEAD_MIN_SPEED


def test_prepare_resets_after_crash():
    player = Player()
    _thrust(player, 30)
    player.kill()
    player.update(GameState.PLAYER_DEAD, False, 0.5)
    player.prepare()
    assert player.position == Vec2(0, 0)
    assert player.top_position == Vec2(0, 0)
    assert player.debris_speed_multiplier == 1.0
    assert player.rotation == 90.0