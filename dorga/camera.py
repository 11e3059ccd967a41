"""A camera that eases towards the player."""

from __future__ import annotations

from dataclasses import dataclass

from dorga.geometry import Vec2

CAMERA_FAST_DISTANCE = 50.0
CAMERA_SPEED_SLOW = 150.0
CAMERA_SPEED_FAST = 300.0


@dataclass(frozen=True)
class Camera2D:
    """The view transform used when drawing the world."""

    target: Vec2 = Vec2()
    offset: Vec2 = Vec2()
    rotation: float = 0.0
    zoom: float = 0.0


class CameraManager:
    """Follows the player with a speed that grows with distance."""

    def __init__(self) -> None:
        self.position = Vec2()
        self.camera = Camera2D()
        self.speed = 0.0

    def prepare(self) -> None:
        """Return the camera to the origin."""
        self.position = Vec2()

    def update(self, player_position: Vec2, screen_width: int, screen_height: int,
               delta_time: float) -> None:
        """Move towards the player and rebuild the view transform."""
        distance = player_position.distance_to(self.position)
        direction = (player_position - self.position).normalized()

        self.speed = min(distance / CAMERA_FAST_DISTANCE * CAMERA_SPEED_SLOW, CAMERA_SPEED_FAST)
        self.position = self.position + direction * (self.speed * delta_time)

        self.camera = Camera2D(
            target=self.position,
            offset=Vec2(float(screen_width // 2), float(screen_height // 2)),
            rotation=0.0,
            zoom=1.0,
        )