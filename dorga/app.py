"""Drawing, the on-screen score display and the game's main loop."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from pathlib import Path

import pygame

from dorga.camera import Camera2D
from dorga.game import COIN_SOUNDS, GameManager
from dorga.geometry import Vec2
from dorga.objects import Coin, Obstacle, WorldObject
from dorga.state import GameState

TARGET_FPS = 60
FONT_SIZE = 25
WHITE = (255, 255, 255)
LIME = (0, 158, 47)
TITLE = "Dorga"


def hud_lines(manager: GameManager, screen_width: int,
              screen_height: int) -> list[tuple[str, int, int]]:
    """The score texts to show for the current state, with their positions."""
    centre_x = screen_width // 2
    if manager.state is GameState.PLAYING:
        return [(f"Stars: {manager.coins_current}", centre_x, 0)]
    if manager.state is GameState.PLAYER_DEAD:
        centre_y = screen_height // 2
        return [
            (f"Stars: {manager.coins_total}", centre_x, 0),
            (f"Stars: {manager.coins_current}", centre_x, centre_y),
            (f"Highscore: {manager.coins_highscore}", centre_x, centre_y - 50),
        ]
    return []


class Renderer:
    """Draws the world, the rocket and the score display onto a surface."""

    def __init__(self, surface: pygame.Surface, clock: pygame.time.Clock | None = None) -> None:
        pygame.font.init()
        self.surface = surface
        self.clock = clock
        self.font = pygame.font.Font(None, FONT_SIZE)

    def draw(self, manager: GameManager) -> None:
        """Draw one complete frame for the game's current state."""
        self.surface.fill(manager.colors.background())
        camera = manager.camera.camera

        for obj in manager.world.objects():
            self._draw_object(manager, camera, obj)
        self._draw_player(manager, camera)

        width, height = self.surface.get_size()
        for text, x, y in hud_lines(manager, width, height):
            self.surface.blit(self.font.render(text, True, WHITE), (x, y))

        if self.clock is not None:
            fps = f"{round(self.clock.get_fps()):2d} FPS"
            self.surface.blit(self.font.render(fps, True, LIME), (width // 4, 0))

    @staticmethod
    def _to_screen(camera: Camera2D, point: Vec2) -> tuple[float, float]:
        return (point.x - camera.target.x + camera.offset.x,
                point.y - camera.target.y + camera.offset.y)

    def _draw_object(self, manager: GameManager, camera: Camera2D, obj: WorldObject) -> None:
        centre = self._to_screen(camera, obj.position)
        if isinstance(obj, Obstacle):
            radius = obj.radius()
            pygame.draw.circle(self.surface, manager.colors.asteroid_000(), centre, radius)
            angle = math.radians(obj.rotation + obj.frame * 3.0)
            inner = (centre[0] + math.cos(angle) * radius * 0.3,
                     centre[1] + math.sin(angle) * radius * 0.3)
            pygame.draw.circle(self.surface, manager.colors.asteroid_001(), inner, radius * 0.45)
        elif isinstance(obj, Coin):
            pygame.draw.polygon(self.surface, manager.colors.coin(),
                                _star_points(centre, obj.radius(), obj.rotation))
        else:
            pygame.draw.circle(self.surface, manager.colors.background_star(), centre, obj.scale)

    def _draw_player(self, manager: GameManager, camera: Camera2D) -> None:
        player = manager.player
        colors = manager.colors
        angle = math.radians(player.rotation)
        heading = (math.cos(angle), -math.sin(angle))
        side = (-heading[1], heading[0])

        def at(position: Vec2, forward: float, across: float) -> tuple[float, float]:
            x, y = self._to_screen(camera, position)
            return (x + heading[0] * forward + side[0] * across,
                    y + heading[1] * forward + side[1] * across)

        frame = player.fire_frame()
        if frame is not None:
            length = 6.0 + 3.0 * min(frame, 4) + (frame % 2) * 2.0
            pygame.draw.polygon(self.surface, colors.rocket_fire(), [
                at(player.main_position, -8.0, -4.0),
                at(player.main_position, -8.0, 4.0),
                at(player.main_position, -8.0 - length, 0.0),
            ])

        pygame.draw.polygon(self.surface, colors.rocket_base(), [
            at(player.main_position, 8.0, -5.0),
            at(player.main_position, 8.0, 5.0),
            at(player.main_position, -8.0, 5.0),
            at(player.main_position, -8.0, -5.0),
        ])
        pygame.draw.circle(self.surface, colors.rocket_window(),
                           at(player.window_position, 2.0, 0.0), 3.0)
        pygame.draw.polygon(self.surface, colors.rocket_top(), [
            at(player.top_position, 8.0, -5.0),
            at(player.top_position, 8.0, 5.0),
            at(player.top_position, 15.0, 0.0),
        ])
        pygame.draw.polygon(self.surface, colors.rocket_propeller_000(), [
            at(player.propeller_000_position, -2.0, -5.0),
            at(player.propeller_000_position, -9.0, -9.0),
            at(player.propeller_000_position, -9.0, -5.0),
        ])
        pygame.draw.polygon(self.surface, colors.rocket_propeller_001(), [
            at(player.propeller_001_position, -4.0, -1.5),
            at(player.propeller_001_position, -4.0, 1.5),
            at(player.propeller_001_position, -10.0, 1.5),
            at(player.propeller_001_position, -10.0, -1.5),
        ])
        pygame.draw.polygon(self.surface, colors.rocket_propeller_002(), [
            at(player.propeller_002_position, -2.0, 5.0),
            at(player.propeller_002_position, -9.0, 9.0),
            at(player.propeller_002_position, -9.0, 5.0),
        ])


def _star_points(centre: tuple[float, float], radius: float,
                 rotation: float) -> list[tuple[float, float]]:
    points = []
    for corner in range(10):
        reach = radius if corner % 2 == 0 else radius * 0.45
        angle = math.radians(rotation + corner * 36.0 - 90.0)
        points.append((centre[0] + math.cos(angle) * reach,
                       centre[1] + math.sin(angle) * reach))
    return points


class _PygameAudio:
    """Music and coin sounds through the pygame mixer; silent if unavailable.

    The mixer cannot change a sound's pitch, so coin sounds play unshifted.
    """

    def __init__(self, sounds_dir: Path) -> None:
        self._coins: list[pygame.mixer.Sound | None] = []
        self._music_loaded = False
        try:
            pygame.mixer.init()
        except pygame.error:
            self._enabled = False
            return
        self._enabled = True
        for index in range(COIN_SOUNDS):
            path = sounds_dir / f"Coin_{index:03d}.mp3"
            self._coins.append(pygame.mixer.Sound(str(path)) if path.is_file() else None)
        music = sounds_dir / "Music_001.mp3"
        if music.is_file():
            pygame.mixer.music.load(str(music))
            self._music_loaded = True

    def play_music(self) -> None:
        if self._enabled and self._music_loaded:
            pygame.mixer.music.play(loops=-1)

    def stop_music(self) -> None:
        if self._enabled and self._music_loaded:
            pygame.mixer.music.stop()

    def play_coin(self, index: int, pitch: float) -> None:
        if self._enabled and index < len(self._coins) and self._coins[index] is not None:
            self._coins[index].play()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="dorga", description="Steer a rocket and collect stars.")
    parser.add_argument("--sounds", type=Path, default=Path("Sounds"),
                        help="directory holding the coin sounds and music")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((0, 0))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        manager = GameManager(audio=_PygameAudio(args.sounds))
        renderer = Renderer(surface, clock)

        delta_time = 0.0
        while True:
            pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return 0
                    if event.key == pygame.K_SPACE:
                        pressed = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed = True

            held = bool(pygame.mouse.get_pressed()[0] or pygame.key.get_pressed()[pygame.K_SPACE])
            width, height = surface.get_size()
            manager.update(width, height, delta_time, pressed, held)
            renderer.draw(manager)
            pygame.display.flip()
            delta_time = clock.tick(TARGET_FPS) / 1000.0
    finally:
        pygame.quit()