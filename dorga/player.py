"""The player's rocket: thrust, steering, and debris after a crash."""

from __future__ import annotations

import math

from dorga.geometry import Vec2
from dorga.state import GameState

FIRE_TEXTURES = 14
FIRE_ACCELERATE_TEXTURES = 4
FIRE_MOVING_TEXTURES = 10
FIRE_TEXTURE_SPEED = 10.0

MAX_PLAYER_SPEED = 300.0
ACCELERATION = 350.0
DECELERATION = 100.0
DECELERATION_STOP_TOLERANCE = 0.01
ROTATE_SPEED = -300.0

HITBOX_RADIUS = 12.0

PLAYER_DEAD_DECELERATION = 0.5
PLAYER_DEAD_MIN_SPEED = 0.25

_NO_FIRE = -1.0


class Player:
    """A rocket that spins while coasting and thrusts forward while held."""

    def __init__(self) -> None:
        self.fire_texture = _NO_FIRE
        self.dead_position = Vec2()
        self.prepare()

    def prepare(self) -> None:
        """Reset the rocket to the origin, pointing up and at rest."""
        self.velocity = Vec2()
        self.position = Vec2()
        self.rotation = 90.0
        self._sync_parts()
        self.debris_speed_multiplier = 1.0

    def _sync_parts(self) -> None:
        self.main_position = self.position
        self.window_position = self.position
        self.top_position = self.position
        self.propeller_000_position = self.position
        self.propeller_001_position = self.position
        self.propeller_002_position = self.position

    def kill(self) -> None:
        """Remember where the rocket broke apart."""
        self.dead_position = self.position

    def radius(self) -> float:
        return HITBOX_RADIUS

    def fire_frame(self) -> int | None:
        """Index of the exhaust frame to draw, or None when the engine is off."""
        if self.fire_texture == _NO_FIRE:
            return None
        return min(int(self.fire_texture), FIRE_TEXTURES - 1)

    def update(self, state: GameState, thrusting: bool, delta_time: float) -> None:
        """Advance the rocket by one frame in the given game state."""
        if state is GameState.MAIN_MENU:
            self.fire_texture = _NO_FIRE
        elif state is GameState.PLAYING:
            self._update_playing(thrusting, delta_time)
        elif state is GameState.PLAYER_DEAD:
            self._update_dead(delta_time)

    def _update_playing(self, thrusting: bool, delta_time: float) -> None:
        angle = math.radians(self.rotation)
        if thrusting:
            self.velocity = self.velocity + Vec2(math.cos(angle), math.sin(angle)) * (
                ACCELERATION * delta_time)
            if self.fire_texture == _NO_FIRE:
                self.fire_texture = 0.0
            self.fire_texture += FIRE_TEXTURE_SPEED * delta_time
            if self.fire_texture > FIRE_TEXTURES:
                self.fire_texture = float(FIRE_ACCELERATE_TEXTURES)
        else:
            self.rotation = math.fmod(self.rotation + ROTATE_SPEED * delta_time, 360.0)
            if self.fire_texture > FIRE_ACCELERATE_TEXTURES:
                self.fire_texture = float(FIRE_ACCELERATE_TEXTURES)
            self.fire_texture -= FIRE_TEXTURE_SPEED * delta_time
            if self.fire_texture <= 0:
                self.fire_texture = _NO_FIRE

        speed = self.velocity.length()
        if speed > 0:
            self.velocity = self.velocity - self.velocity * (DECELERATION * delta_time / speed)
            speed = self.velocity.length()
            if speed < DECELERATION_STOP_TOLERANCE:
                self.velocity = Vec2()

        if speed > MAX_PLAYER_SPEED:
            self.velocity = self.velocity * (MAX_PLAYER_SPEED / speed)

        self.position = Vec2(
            self.position.x + self.velocity.x * delta_time,
            self.position.y - self.velocity.y * delta_time,
        )
        self._sync_parts()

    def _update_dead(self, delta_time: float) -> None:
        self.fire_texture = _NO_FIRE
        self._move_debris(delta_time * self.debris_speed_multiplier)
        self.debris_speed_multiplier = max(
            self.debris_speed_multiplier - PLAYER_DEAD_DECELERATION * delta_time,
            PLAYER_DEAD_MIN_SPEED,
        )

    def _move_debris(self, delta_time: float) -> None:
        x = self.velocity.x * delta_time
        y = self.velocity.y * delta_time
        self.main_position = self.main_position + Vec2(x, -y)
        self.window_position = self.window_position + Vec2(x, -y)
        self.top_position = self.top_position + Vec2(x * 1.25, -y * 1.25)
        self.propeller_000_position = self.propeller_000_position + Vec2(-y, -x)
        self.propeller_001_position = self.propeller_001_position + Vec2(-x, y)
        self.propeller_002_position = self.propeller_002_position + Vec2(y, x)