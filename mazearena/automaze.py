"""Automatic maze: characters move greedily by themselves; the player only places them."""

from __future__ import annotations

from .core import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    CHARACTER_COUNT,
    END_TURN,
    INF,
    MT19937,
    Coord,
    Direction,
    generate_random_points,
    is_valid_coord,
    step,
)
from .maze import _render

__all__ = ["AutoMazeState"]


class AutoMazeState:
    """A board of points with several characters that each walk to their best neighbour."""

    def __init__(
        self,
        seed: int = 0,
        height: int = BOARD_HEIGHT,
        width: int = BOARD_WIDTH,
        end_turn: int = END_TURN,
        character_count: int = CHARACTER_COUNT,
    ) -> None:
        self.height = height
        self.width = width
        self.end_turn = end_turn
        self.turn = 0
        self.game_score = 0
        self.evaluated_score = 0
        self.characters = [Coord() for _ in range(character_count)]
        self.points = generate_random_points(height, width, MT19937(seed), 0, 9)

    def set_character(self, character_id: int, y: int, x: int) -> None:
        self.characters[character_id] = Coord(y, x)

    def _move_character(self, character_id: int) -> None:
        here = self.characters[character_id]
        best_point = -INF
        best_action = Direction.RIGHT
        for direction in Direction:
            target = step(here, direction)
            if is_valid_coord(target, self.height, self.width):
                point = self.points[target.y][target.x]
                if point > best_point:
                    best_point = point
                    best_action = direction
        self.characters[character_id] = step(here, best_action)

    def progress(self, action: int = 0) -> None:
        """Advance one turn; the action is ignored because characters move on their own."""
        for character_id in range(len(self.characters)):
            self._move_character(character_id)
        for character in self.characters:
            self.game_score += self.points[character.y][character.x]
            self.points[character.y][character.x] = 0
        self.turn += 1

    def is_done(self) -> bool:
        return self.turn == self.end_turn

    def legal_actions(self) -> list[int]:
        """Every combination of starting cells, one index per combination."""
        return list(range((self.height * self.width) ** len(self.characters)))

    def get_score(self, is_print: bool = False) -> int:
        """Play a copy to the end and return its final score."""
        trial = self.clone()
        while not trial.is_done():
            trial.progress(0)
            if is_print:
                print(trial)
        return trial.game_score

    def evaluate_score(self) -> int:
        self.evaluated_score = self.get_score()
        return self.evaluated_score

    def clone(self) -> "AutoMazeState":
        twin = AutoMazeState.__new__(AutoMazeState)
        twin.__dict__.update(self.__dict__)
        twin.points = [list(row) for row in self.points]
        twin.characters = list(self.characters)
        return twin

    def __str__(self) -> str:
        return (
            f"turn:\t{self.turn}\n"
            f"score:\t{self.game_score}\n"
            + _render(self.points, self.characters)
        )

    def __lt__(self, other: "AutoMazeState") -> bool:
        return self.evaluated_score < other.evaluated_score