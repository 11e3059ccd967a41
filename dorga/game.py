"""Game flow: menu, play, crash and retry, plus scoring."""

from __future__ import annotations

import random
from typing import Protocol

from dorga.camera import CameraManager
from dorga.colors import ColorManager
from dorga.player import Player
from dorga.state import GameState
from dorga.world import World

COIN_SOUNDS = 3
PLAYER_DEAD_RETRY_TIME = 1.0
SEED_LIMIT = 1_000_000
COIN_PITCH_LOW = 13
COIN_PITCH_HIGH = 18


class _Audio(Protocol):
    def play_music(self) -> None: ...

    def stop_music(self) -> None: ...

    def play_coin(self, index: int, pitch: float) -> None: ...


class GameManager:
    """Owns the player, camera, world and palette, and drives the game state."""

    def __init__(self, rng: random.Random | None = None, audio: _Audio | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.audio = audio

        self.player = Player()
        self.camera = CameraManager()
        self.world = World()
        self.colors = ColorManager()

        self.state = GameState.MAIN_MENU
        self.coins_total = 0
        self.coins_current = 0
        self.coins_highscore = 0
        self.coin_sound_index = 0
        self.player_dead_elapsed = 0.0

        self.prepare_game()

    def random_number(self, maximum: int) -> int:
        """A uniformly random integer from 0 to ``maximum`` inclusive."""
        return self.rng.randint(0, maximum)

    def random_in_range(self, low: int, high: int) -> int:
        """A uniformly random integer from ``low`` to ``high`` inclusive."""
        return low + self.random_number(high - low)

    def prepare_game(self) -> None:
        """Build a fresh world with a new seed and reset the player and camera."""
        self.world.clear()
        self.world.prepare(self.random_number(SEED_LIMIT))
        self.player.prepare()
        self.camera.prepare()
        self.coins_current = 0

    def collect_coin(self) -> None:
        """Count a collected coin and play the next coin sound."""
        pitch = self.random_in_range(COIN_PITCH_LOW, COIN_PITCH_HIGH) / 10.0
        if self.audio is not None:
            self.audio.play_coin(self.coin_sound_index, pitch)
        self.coin_sound_index = (self.coin_sound_index + 1) % COIN_SOUNDS
        self.coins_current += 1

    def kill_player(self) -> None:
        """End the current run; only has an effect while playing."""
        if self.state is not GameState.PLAYING:
            return
        self.player.kill()
        if self.audio is not None:
            self.audio.stop_music()
        self.player_dead_elapsed = 0.0
        self.state = GameState.PLAYER_DEAD
        self.coins_total += self.coins_current
        self.coins_highscore = max(self.coins_highscore, self.coins_current)

    def update(self, width: int, height: int, delta_time: float,
               pressed: bool, held: bool) -> None:
        """Advance the game by one frame.

        ``pressed`` is true on the frame the action input went down,
        ``held`` while it stays down.
        """
        if self.state is GameState.MAIN_MENU:
            if pressed:
                if self.audio is not None:
                    self.audio.play_music()
                self.state = GameState.PLAYING
        elif self.state is GameState.PLAYER_DEAD:
            self.player_dead_elapsed += delta_time
            if self.player_dead_elapsed >= PLAYER_DEAD_RETRY_TIME and pressed:
                self.prepare_game()
                self.colors.next_palette()
                self.state = GameState.MAIN_MENU

        self.player.update(self.state, held, delta_time)

        result = self.world.update(self.player.position, self.player.radius(), delta_time)
        if result.player_hit:
            self.kill_player()
        if result.coin_collected:
            self.collect_coin()

        self.camera.update(self.player.position, width, height, delta_time)