"""Single-player maze: one character collects points for a fixed number of turns."""

from __future__ import annotations

from .core import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    END_TURN,
    MT19937,
    Coord,
    Direction,
    generate_random_points,
    is_valid_coord,
    step,
)

__all__ = ["MazeState"]


def _render(points: list[list[int]], characters: list[Coord]) -> str:
    occupied = set(characters)
    lines = []
    for y, row in enumerate(points):
        cells = []
        for x, value in enumerate(row):
            if Coord(y, x) in occupied:
                cells.append("@")
            elif value > 0:
                cells.append(str(value))
            else:
                cells.append(".")
        lines.append("".join(cells) + "\n")
    return "".join(lines)


class MazeState:
    """A board of points and one character moved by the player."""

    def __init__(
        self,
        seed: int | None = None,
        height: int = BOARD_HEIGHT,
        width: int = BOARD_WIDTH,
        end_turn: int = END_TURN,
    ) -> None:
        self.height = height
        self.width = width
        self.end_turn = end_turn
        self.turn = 0
        self.game_score = 0
        self.first_action = -1
        self.evaluated_score = 0
        if seed is None:
            self.character = Coord()
            self.points = [[0] * width for _ in range(height)]
            return
        rng = MT19937(seed)
        y = rng() % height
        x = rng() % width
        self.character = Coord(y, x)
        self.points = generate_random_points(height, width, rng, 0, 9)
        self.points[y][x] = 0

    def is_done(self) -> bool:
        return self.turn == self.end_turn

    def progress(self, action: int) -> None:
        """Move the character one step and collect the point it lands on."""
        target = step(self.character, action)
        if not is_valid_coord(target, self.height, self.width):
            raise ValueError(f"action {action} leaves the board")
        self.character = target
        point = self.points[target.y][target.x]
        if point > 0:
            self.game_score += point
            self.points[target.y][target.x] = 0
        self.turn += 1

    def legal_actions(self) -> list[int]:
        return [
            int(direction)
            for direction in Direction
            if is_valid_coord(step(self.character, direction), self.height, self.width)
        ]

    def evaluate_score(self) -> int:
        self.evaluated_score = self.game_score
        return self.evaluated_score

    def clone(self) -> "MazeState":
        twin = MazeState.__new__(MazeState)
        twin.__dict__.update(self.__dict__)
        twin.points = [list(row) for row in self.points]
        return twin

    def __str__(self) -> str:
        return (
            f"turn:\t{self.turn}\n"
            f"score:\t{self.game_score}\n"
            + _render(self.points, [self.character])
        )

    def __lt__(self, other: "MazeState") -> bool:
        return self.evaluated_score < other.evaluated_score