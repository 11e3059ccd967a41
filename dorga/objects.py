"""Objects that populate the world: background stars, coins and asteroids."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from dorga.geometry import Vec2, circles_collide

COIN_ROTATE_SPEED = 10.0
COIN_RADIUS_SCALE_MULTIPLIER = 250.0

OBSTACLE_RADIUS_SCALE_MULTIPLIER = 67.0
OBSTACLE_ANIMATION_SPEED = 20.0
OBSTACLE_FRAMES = 121


class Collision(Enum):
    """Outcome of testing an object against the player."""

    NONE = -1
    DEATH = 0
    COIN = 1


@dataclass(eq=False)
class WorldObject:
    """A passive background star that never collides."""

    position: Vec2
    rotation: float
    scale: float

    def update(self, delta_time: float) -> None:
        """Background objects do not change over time."""

    def check_player_collision(self, player_position: Vec2, player_radius: float) -> Collision:
        return Collision.NONE


@dataclass(eq=False)
class Coin(WorldObject):
    """A spinning collectible."""

    def radius(self) -> float:
        return self.scale * COIN_RADIUS_SCALE_MULTIPLIER

    def update(self, delta_time: float) -> None:
        self.rotation = math.fmod(self.rotation + COIN_ROTATE_SPEED * delta_time, 360.0)

    def check_player_collision(self, player_position: Vec2, player_radius: float) -> Collision:
        if circles_collide(self.position, self.radius(), player_position, player_radius):
            return Collision.COIN
        return Collision.NONE


@dataclass(eq=False)
class Obstacle(WorldObject):
    """An animated asteroid that kills the player on contact.

    Frame 0 is the static base layer; the animation loops over frames
    1 to ``frame_count - 1``.
    """

    frame_count: int = OBSTACLE_FRAMES
    current_frame: float = 0.0

    def radius(self) -> float:
        return self.scale * OBSTACLE_RADIUS_SCALE_MULTIPLIER

    @property
    def frame(self) -> int:
        """Index of the animation frame drawn over the base layer."""
        return int(self.current_frame)

    def update(self, delta_time: float) -> None:
        self.current_frame += OBSTACLE_ANIMATION_SPEED * delta_time
        if self.current_frame >= self.frame_count:
            self.current_frame = 1.0

    def check_player_collision(self, player_position: Vec2, player_radius: float) -> Collision:
        if circles_collide(self.position, self.radius(), player_position, player_radius):
            return Collision.DEATH
        return Collision.NONE