"""Alternating two-player maze: players take turns collecting points on one board."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .core import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    END_TURN,
    MT19937,
    Coord,
    Direction,
    WinningStatus,
    generate_random_points,
    is_valid_coord,
    step,
)

__all__ = ["TwoMazePlayer", "TwoMazeState"]


@dataclass
class TwoMazePlayer:
    """A player's position and collected score."""

    coord: Coord = field(default_factory=Coord)
    game_score: int = 0


class TwoMazeState:
    """Board state where ``players[0]`` is always the side to move."""

    def __init__(
        self,
        rng: MT19937 | None = None,
        height: int = BOARD_HEIGHT,
        width: int = BOARD_WIDTH,
        end_turn: int = END_TURN,
    ) -> None:
        self.height = height
        self.width = width
        self.end_turn = end_turn
        self.turn = 0
        self.first_action = -1
        self.evaluated_score = 0
        self.points = [[0] * width for _ in range(height)]
        if rng is None:
            self.players = [TwoMazePlayer(), TwoMazePlayer()]
            return
        self.players = [
            TwoMazePlayer(Coord(height // 2, width // 2 - 1)),
            TwoMazePlayer(Coord(height // 2, width // 2 + 1)),
        ]
        # The caller's generator is left untouched; a copy drives construction.
        generator = rng.copy()
        starts = {player.coord for player in self.players}
        for y in range(height):
            for x in range(width):
                if Coord(y, x) in starts:
                    self.points[y][x] = 0
                else:
                    self.points = generate_random_points(height, width, generator, 0, 9)

    def is_done(self) -> bool:
        return self.turn >= self.end_turn

    def progress(self, action: int) -> None:
        """Move the player to act, collect the point, and pass the turn."""
        player = self.players[0]
        target = step(player.coord, action)
        if not is_valid_coord(target, self.height, self.width):
            raise ValueError(f"action {action} leaves the board")
        player.coord = target
        point = self.points[target.y][target.x]
        if point > 0:
            player.game_score += point
            self.points[target.y][target.x] = 0
        self.turn += 1
        self.players.reverse()

    def legal_actions(self) -> list[int]:
        here = self.players[0].coord
        return [
            int(direction)
            for direction in Direction
            if is_valid_coord(step(here, direction), self.height, self.width)
        ]

    def current_player_score(self) -> int:
        return self.players[0].game_score

    def opponent_score(self) -> int:
        return self.players[1].game_score

    def evaluate_score(self) -> int:
        self.evaluated_score = self.current_player_score() - self.opponent_score()
        return self.evaluated_score

    def _scores_from_start(self) -> tuple[int, int]:
        """Scores of the first and second mover, whoever acts now."""
        if self.turn % 2 == 0:
            return self.players[0].game_score, self.players[1].game_score
        return self.players[1].game_score, self.players[0].game_score

    def winning_status(self) -> WinningStatus:
        """Outcome from the first mover's side, or NONE while the game runs."""
        if not self.is_done():
            return WinningStatus.NONE
        first, second = self._scores_from_start()
        if first > second:
            return WinningStatus.WIN
        if first < second:
            return WinningStatus.LOSE
        return WinningStatus.DRAW

    def score_rate(self) -> float:
        """The first mover's share of all points collected; 0.5 when none are."""
        first, second = self._scores_from_start()
        total = first + second
        if total == 0:
            return 0.5
        return first / total

    def clone(self) -> "TwoMazeState":
        twin = TwoMazeState.__new__(TwoMazeState)
        twin.__dict__.update(self.__dict__)
        twin.points = [list(row) for row in self.points]
        twin.players = [replace(player) for player in self.players]
        return twin

    def __str__(self) -> str:
        swapped = self.turn % 2 == 1
        lines = [f"turn:\t{self.turn}\n"]
        for player_id in range(len(self.players)):
            index = (player_id + 1) % 2 if swapped else player_id
            player = self.players[index]
            lines.append(
                f"score:\t{player_id}:\t{player.game_score}"
                f"\ty: {player.coord.y}\tx: {player.coord.x}\n"
            )
        for h in range(self.height):
            cells = []
            for w in range(self.width):
                mark = None
                for player_id, player in enumerate(self.players):
                    label_id = (player_id + 1) % 2 if swapped else player_id
                    if player.coord == Coord(h, w):
                        mark = "A" if label_id == 0 else "B"
                        break
                if mark is None:
                    value = self.points[h][w]
                    mark = str(value) if value > 0 else "."
                cells.append(mark)
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def __lt__(self, other: "TwoMazeState") -> bool:
        return self.evaluated_score < other.evaluated_score