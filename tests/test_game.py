import random

import pytest

from dorga.colors import ColorManager
from dorga.game import GameManager
from dorga.geometry import Vec2
from dorga.state import GameState


class RecordingAudio:
    def __init__(self):
        self.events = []

    def play_music(self):
        self.events.append(("music", "play"))

    def stop_music(self):
        self.events.append(("music", "stop"))

    def play_coin(self, index, pitch):
        self.events.append(("coin", index, pitch))


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def manager(audio):
    return GameManager(rng=random.Random(1234), audio=audio)


def start_playing(manager):
    manager.update(400, 300, 0.016, True, False)
    assert manager.state is GameState.PLAYING


def test_starts_in_main_menu_with_no_coins(manager):
    assert manager.state is GameState.MAIN_MENU
    assert (manager.coins_current, manager.coins_total, manager.coins_highscore) == (0, 0, 0)


def test_random_number_is_inclusive_and_bounded(manager):
    values = {manager.random_number(3) for _ in range(500)}
    assert values == {0, 1, 2, 3}


def test_random_in_range_is_bounded(manager):
    values = {manager.random_in_range(13, 18) for _ in range(500)}
    assert values == set(range(13, 19))


def test_prepare_game_seeds_world_within_limit(manager):
    manager.prepare_game()
    assert 0 <= manager.world.seed <= 1_000_000
    assert manager.player.position == Vec2()
    assert manager.camera.position == Vec2()


def test_menu_waits_for_press(manager, audio):
    manager.update(400, 300, 0.016, False, False)
    assert manager.state is GameState.MAIN_MENU
    assert audio.events == []


def test_press_starts_music_and_play(manager, audio):
    start_playing(manager)
    assert audio.events == [("music", "play")]


def test_kill_ignored_outside_play(manager, audio):
    manager.kill_player()
    assert manager.state is GameState.MAIN_MENU
    assert audio.events == []


def test_collect_coin_cycles_sounds(manager, audio):
    for _ in range(4):
        manager.collect_coin()
    assert manager.coins_current == 4
    coin_events = [e for e in audio.events if e[0] == "coin"]
    assert [e[1] for e in coin_events] == [0, 1, 2, 0]
    assert all(1.3 <= e[2] <= 1.8 for e in coin_events)


def test_kill_records_score_and_stops_music(manager, audio):
    start_playing(manager)
    for _ in range(3):
        manager.collect_coin()
    manager.kill_player()
    assert manager.state is GameState.PLAYER_DEAD
    assert manager.coins_total == 3
    assert manager.coins_highscore == 3
    assert audio.events[-1] == ("music", "stop")


def test_retry_requires_delay_and_press(manager):
    start_playing(manager)
    manager.kill_player()
    manager.update(400, 300, 0.5, True, False)
    assert manager.state is GameState.PLAYER_DEAD
    manager.update(400, 300, 0.6, False, False)
    assert manager.state is GameState.PLAYER_DEAD
    manager.update(400, 300, 0.0, True, False)
    assert manager.state is GameState.MAIN_MENU


def test_retry_advances_palette_and_resets_run(manager):
    start_playing(manager)
    manager.collect_coin()
    manager.kill_player()
    manager.update(400, 300, 1.0, True, False)
    expected = ColorManager()
    expected.next_palette()
    assert manager.colors.background() == expected.background()
    assert manager.coins_current == 0
    assert manager.coins_total == 1


def test_highscore_keeps_best_run_and_total_accumulates(manager):
    start_playing(manager)
    for _ in range(3):
        manager.collect_coin()
    manager.kill_player()
    manager.update(400, 300, 1.0, True, False)
    start_playing(manager)
    manager.collect_coin()
    manager.kill_player()
    assert manager.coins_highscore == 3
    assert manager.coins_total == 4


def test_thrust_moves_player_upwards(manager):
    start_playing(manager)
    for _ in range(5):
        manager.update(400, 300, 0.05, False, True)
    assert manager.player.position.y < 0
    assert manager.player.fire_frame() is not None


def test_player_stays_still_in_menu(manager):
    manager.update(400, 300, 0.1, False, True)
    assert manager.player.position == Vec2()
    assert manager.player.fire_frame() is None