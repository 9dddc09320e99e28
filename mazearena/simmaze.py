"""Simultaneous two-player maze: both players choose a move each turn."""

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
    is_valid_coord,
    step,
)

__all__ = ["SimMazePlayer", "SimMazeState", "encode_actions", "decode_actions"]


def encode_actions(action0: int, action1: int) -> int:
    """Pack two players' moves into one action number."""
    return action0 * 4 + action1


def decode_actions(encoded_action: int) -> tuple[int, int]:
    """Split an action number into the two players' moves."""
    return encoded_action // 4, encoded_action % 4


@dataclass
class SimMazePlayer:
    """A player's position and collected score."""

    coord: Coord = field(default_factory=Coord)
    game_score: int = 0


class SimMazeState:
    """Mirror-symmetric board where both players move at the same time."""

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
        self.evaluated_score = 0
        self.last_actions = [-1, -1]
        self.points = [[0] * width for _ in range(height)]
        if rng is None:
            self.players = [SimMazePlayer(), SimMazePlayer()]
            return
        self.players = [
            SimMazePlayer(Coord(height // 2, width // 2 - 1)),
            SimMazePlayer(Coord(height // 2, width // 2 + 1)),
        ]
        # The caller's generator is left untouched; a copy drives construction.
        generator = rng.copy()
        for y in range(height):
            for x in range(width):
                mirror = width - 1 - x
                near_player = any(
                    player.coord.y == y and player.coord.x in (x, mirror)
                    for player in self.players
                )
                point = 0 if near_player else generator() % 10
                self.points[y][x] = point
                self.points[y][mirror] = point

    def is_done(self) -> bool:
        return self.turn >= self.end_turn

    def progress(self, encoded_action: int) -> None:
        """Advance one turn with both moves packed into one number."""
        self.advance(*decode_actions(encoded_action))

    def advance(self, action0: int, action1: int) -> None:
        """Move both players; on a collision the cell is cleared and nobody scores."""
        targets = [
            step(player.coord, action)
            for player, action in zip(self.players, (action0, action1))
        ]
        for action, target in zip((action0, action1), targets):
            if not is_valid_coord(target, self.height, self.width):
                raise ValueError(f"action {action} leaves the board")
        self.last_actions = [action0, action1]
        for player, target in zip(self.players, targets):
            player.coord = target

        first, second = self.players
        if first.coord == second.coord:
            self.points[first.coord.y][first.coord.x] = 0
        else:
            for player in self.players:
                y, x = player.coord.y, player.coord.x
                point = self.points[y][x]
                if point > 0:
                    player.game_score += point
                    self.points[y][x] = 0
        self.turn += 1

    def legal_actions(self, player_id: int | None = None) -> list[int]:
        """Moves of one player, or every encoded pair of moves when no player is given."""
        if player_id is None:
            return [
                encode_actions(a0, a1)
                for a0 in self.legal_actions(0)
                for a1 in self.legal_actions(1)
            ]
        here = self.players[player_id].coord
        return [
            int(direction)
            for direction in Direction
            if is_valid_coord(step(here, direction), self.height, self.width)
        ]

    def player_score(self, player_id: int) -> int:
        return self.players[player_id].game_score

    def point(self, y: int, x: int) -> int:
        return self.points[y][x]

    def evaluate_score(self) -> int:
        self.evaluated_score = self.players[0].game_score - self.players[1].game_score
        return self.evaluated_score

    def winning_status(self) -> WinningStatus:
        """Outcome from player 0's side, or NONE while the game runs."""
        if not self.is_done():
            return WinningStatus.NONE
        first, second = self.player_score(0), self.player_score(1)
        if first > second:
            return WinningStatus.WIN
        if first < second:
            return WinningStatus.LOSE
        return WinningStatus.DRAW

    def score_rate(self) -> float:
        """Player 0's share of all points collected; 0.5 when none are."""
        first, second = self.player_score(0), self.player_score(1)
        total = first + second
        if total == 0:
            return 0.5
        return first / total

    def clone(self) -> "SimMazeState":
        twin = SimMazeState.__new__(SimMazeState)
        twin.__dict__.update(self.__dict__)
        twin.points = [list(row) for row in self.points]
        twin.players = [replace(player) for player in self.players]
        twin.last_actions = list(self.last_actions)
        return twin

    def __str__(self) -> str:
        lines = [f"turn:\t{self.turn}\n"]
        for player_id, player in enumerate(self.players):
            line = f"score({player_id}):\t{player.game_score}"
            last = self.last_actions[player_id]
            if last >= 0:
                name = Direction(last).name if last < len(Direction) else "UNKNOWN"
                line += f"\tlast action: {name}"
            lines.append(line + "\n")
        for h in range(self.height):
            cells = []
            for w in range(self.width):
                mark = None
                for player_id, player in enumerate(self.players):
                    if player.coord == Coord(h, w):
                        mark = "A" if player_id == 0 else "B"
                        break
                if mark is None:
                    value = self.points[h][w]
                    mark = str(value) if value > 0 else "."
                cells.append(mark)
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def __lt__(self, other: "SimMazeState") -> bool:
        return self.evaluated_score < other.evaluated_score