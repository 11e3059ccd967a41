"""An endless world generated chunk by chunk from a seed."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from dataclasses import dataclass

from dorga.geometry import Vec2
from dorga.objects import Coin, Collision, Obstacle, WorldObject

CHUNK_SIZE = 500.0
CHUNK_OBJECT_SIZE = 150.0
PLAYER_LOAD_CHUNK_RADIUS = 2

COIN_SPAWN_CHANCE = 0.1
OBSTACLE_BASE_CHANCE = 0.05
OBSTACLE_CHANCE_PER_CHUNK = 0.001
OBSTACLE_MAX_CHANCE = 0.3

_U32 = 0xFFFFFFFF

Chunk = tuple[int, int]


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class UpdateResult:
    """What happened to the player during one world update."""

    collected_coin: Coin | None = None
    player_hit: bool = False

    @property
    def coin_collected(self) -> bool:
        return self.collected_coin is not None


class World:
    """Loads chunks around the player and tracks the objects inside them."""

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed & _U32
        self._chunks: dict[Chunk, list[WorldObject]] = {}
        self._collected: set[tuple[int, int]] = set()

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def loaded_chunks(self) -> frozenset[Chunk]:
        return frozenset(self._chunks)

    @property
    def collected_coins(self) -> frozenset[tuple[int, int]]:
        return frozenset(self._collected)

    def prepare(self, seed: int) -> None:
        """Start a fresh world with a new seed."""
        self._seed = seed & _U32
        self._chunks = {}
        self._collected = set()

    def clear(self) -> None:
        """Unload every loaded chunk."""
        for chunk in list(self._chunks):
            self.unload_chunk(chunk)

    def random_from_seed(self, x: int, y: int) -> float:
        """A deterministic value in [0, 1] for the given grid position."""
        h = self._seed
        h ^= ((x & _U32) * 928371 & _U32) ^ ((y & _U32) * 982451 & _U32)
        h = ((h ^ (h >> 16)) * 0x45D9F3B) & _U32
        h = ((h ^ (h >> 16)) * 0x45D9F3B) & _U32
        h ^= h >> 16
        h ^= h >> 6
        h = (h * 0x6D2B79F5) & _U32
        h ^= h >> 16
        return _f32(_f32(float(h)) / _f32(float(_U32)))

    def random_between(self, low: float, high: float, x: int, y: int) -> float:
        """A deterministic value between ``low`` and ``high`` for a grid position."""
        return low + (high - low) * self.random_from_seed(x, y)

    def chunk_of(self, position: Vec2) -> Chunk:
        """The chunk coordinates containing a point, truncated towards zero."""
        return int(position.x / CHUNK_SIZE), int(position.y / CHUNK_SIZE)

    def load_unload_nearby_chunks(self, player_position: Vec2) -> None:
        """Load chunks within reach of the player and drop the rest."""
        cx, cy = self.chunk_of(player_position)
        r = PLAYER_LOAD_CHUNK_RADIUS
        wanted = {
            (x, y)
            for x in range(cx - r, cx + r + 1)
            for y in range(cy - r, cy + r + 1)
        }
        for chunk in sorted(wanted - self._chunks.keys()):
            self.load_chunk(chunk)
        for chunk in sorted(self._chunks.keys() - wanted):
            self.unload_chunk(chunk)

    def load_chunk(self, chunk: Chunk) -> None:
        """Generate the objects of one chunk."""
        cx, cy = chunk
        objects: list[WorldObject] = []
        self._chunks[chunk] = objects

        half_chunk = CHUNK_SIZE / 2
        half_object = CHUNK_OBJECT_SIZE / 2
        min_x = int(cx * CHUNK_SIZE - half_chunk + half_object)
        max_x = int(cx * CHUNK_SIZE + half_chunk - half_object)
        min_y = int(cy * CHUNK_SIZE - half_chunk + half_object)
        max_y = int(cy * CHUNK_SIZE + half_chunk - half_object)
        step = int(CHUNK_OBJECT_SIZE)

        chunk_distance = int(math.sqrt(cx * cx + cy * cy))
        coin_chance = COIN_SPAWN_CHANCE
        obstacle_chance = min(
            OBSTACLE_BASE_CHANCE + OBSTACLE_CHANCE_PER_CHUNK * chunk_distance,
            OBSTACLE_MAX_CHANCE,
        )
        if chunk == (0, 0):
            coin_chance = obstacle_chance = 0.0

        for x in range(min_x, max_x + 1, step):
            for y in range(min_y, max_y + 1, step):
                roll = self.random_from_seed(x, y)

                if 0.075 < roll < 0.5:
                    objects.append(WorldObject(
                        Vec2(x + roll * 200, y + roll * 200),
                        0.0,
                        self.random_between(1, 5, x, y),
                    ))

                if coin_chance > 0 and roll <= coin_chance and (x, y) not in self._collected:
                    objects.append(Coin(
                        Vec2(float(x), float(y)),
                        self.random_between(0, 360 / coin_chance, x, y),
                        0.65 * roll + 0.065 / 2,
                    ))

                if obstacle_chance > 0 and roll >= 1 - obstacle_chance:
                    objects.append(Obstacle(
                        Vec2(float(x), float(y)),
                        self.random_between(0, 360 / obstacle_chance, x, y),
                        roll ** 7,
                    ))

    def unload_chunk(self, chunk: Chunk) -> None:
        """Drop a chunk and its objects."""
        self._chunks.pop(chunk, None)

    def collect_coin(self, coin: Coin) -> None:
        """Remove a coin from the world so it never spawns again this run."""
        self._collected.add((int(coin.position.x), int(coin.position.y)))
        for objects in self._chunks.values():
            for index, obj in enumerate(objects):
                if obj is coin:
                    del objects[index]
                    return

    def objects(self) -> Iterator[WorldObject]:
        """Every object in the loaded chunks, chunk by chunk in sorted order."""
        for chunk in sorted(self._chunks):
            yield from self._chunks[chunk]

    def update(self, player_position: Vec2, player_radius: float,
               delta_time: float) -> UpdateResult:
        """Advance every object and report collisions with the player."""
        self.load_unload_nearby_chunks(player_position)

        coin: Coin | None = None
        hit = False
        for obj in list(self.objects()):
            obj.update(delta_time)
            collision = obj.check_player_collision(player_position, player_radius)
            if collision is Collision.COIN and isinstance(obj, Coin):
                coin = obj
            elif collision is Collision.DEATH:
                hit = True

        if coin is not None:
            self.collect_coin(coin)
        return UpdateResult(collected_coin=coin, player_hit=hit)