"""Shared building blocks: random source, coordinates, directions and board helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "END_TURN",
    "CHARACTER_COUNT",
    "PLAYER_COUNT",
    "INF",
    "MT19937",
    "Coord",
    "Direction",
    "WinningStatus",
    "step",
    "is_valid_coord",
    "generate_random_points",
]

BOARD_HEIGHT = 5
BOARD_WIDTH = 5
END_TURN = 5
CHARACTER_COUNT = 3
PLAYER_COUNT = 2
INF = 1_000_000_000

_MASK32 = 0xFFFFFFFF
_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF


class MT19937:
    """32-bit Mersenne Twister producing the same stream as the standard mt19937."""

    DEFAULT_SEED = 5489

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state: list[int] = []
        self._index = _N
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator; the seed is reduced modulo 2**32."""
        value = seed & _MASK32
        state = [value]
        for i in range(1, _N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        state = self._state
        for i in range(_N):
            y = (state[i] & _UPPER_MASK) | (state[(i + 1) % _N] & _LOWER_MASK)
            value = state[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        """Return the next 32-bit unsigned value."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def copy(self) -> "MT19937":
        """Return an independent generator in the same position of the stream."""
        twin = MT19937.__new__(MT19937)
        twin._state = list(self._state)
        twin._index = self._index
        return twin


@dataclass(frozen=True)
class Coord:
    """A board cell, row first."""

    y: int = 0
    x: int = 0


class Direction(enum.IntEnum):
    """The four moves, numbered as actions."""

    RIGHT = 0
    LEFT = 1
    DOWN = 2
    UP = 3

    @property
    def dy(self) -> int:
        return (0, 0, 1, -1)[self.value]

    @property
    def dx(self) -> int:
        return (1, -1, 0, 0)[self.value]


class WinningStatus(enum.Enum):
    """Outcome of a two-player game from the first player's side."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"
    NONE = "none"


def step(coord: Coord, action: int) -> Coord:
    """Return the cell reached from ``coord`` by moving in direction ``action``."""
    direction = Direction(action)
    return Coord(coord.y + direction.dy, coord.x + direction.dx)


def is_valid_coord(coord: Coord, height: int = BOARD_HEIGHT, width: int = BOARD_WIDTH) -> bool:
    """Whether ``coord`` lies on a board of the given size."""
    return 0 <= coord.y < height and 0 <= coord.x < width


def generate_random_points(
    height: int, width: int, rng: MT19937, low: int = 0, high: int = 9
) -> list[list[int]]:
    """Fill a height x width grid row by row with values in ``low..high``."""
    if high < low:
        raise ValueError("high must not be below low")
    span = high - low + 1
    return [[low + rng() % span for _ in range(width)] for _ in range(height)]