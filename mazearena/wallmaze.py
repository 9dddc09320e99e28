"""Walled maze: one character collects points on a board with generated walls."""

from __future__ import annotations

from collections import deque

from .core import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    END_TURN,
    INF,
    MT19937,
    Coord,
    Direction,
    is_valid_coord,
    step,
)

__all__ = ["WallMazeState"]

_POTENTIAL_WEIGHT = 0.8


class WallMazeState:
    """A board of points and walls with one character moved by the player."""

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
        self.game_score = 0
        self.first_action = -1
        self.evaluated_score = 0
        self.points = [[0] * width for _ in range(height)]
        self.walls = [[0] * width for _ in range(height)]
        self.character = Coord()
        if rng is None:
            return
        # The caller's generator is left untouched; a copy drives construction.
        generator = rng.copy()
        self.character = Coord(generator() % height, generator() % width)
        self._knock_down_pillars(generator)
        for y in range(height):
            for x in range(width):
                if Coord(y, x) == self.character:
                    continue
                self.points[y][x] = generator() % 10

    def _knock_down_pillars(self, generator: MT19937) -> None:
        """Raise a wall on every other cell and topple each onto a random neighbour."""
        for y in range(1, self.height - 1, 2):
            for x in range(1, self.width - 1, 2):
                pillar = Coord(y, x)
                if pillar == self.character:
                    continue
                self.walls[y][x] = 1
                # Right, left and down are candidates; the first row may also fall upwards.
                direction_count = 4 if y == 1 else 3
                fallen = step(pillar, generator() % direction_count)
                if fallen == self.character:
                    continue
                self.walls[fallen.y][fallen.x] = 1

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
        actions = []
        for direction in Direction:
            target = step(self.character, direction)
            if is_valid_coord(target, self.height, self.width) and not self.has_wall(
                target.y, target.x
            ):
                actions.append(int(direction))
        return actions

    def has_wall(self, y: int, x: int) -> bool:
        return self.walls[y][x] == 1

    def bfs_distance(self, start: Coord, goal: Coord) -> int:
        """Fewest steps from ``start`` to ``goal`` avoiding walls, or INF if unreachable."""
        visited = {start}
        queue = deque([(start, 0)])
        while queue:
            current, distance = queue.popleft()
            if current == goal:
                return distance
            for direction in Direction:
                nxt = step(current, direction)
                if (
                    is_valid_coord(nxt, self.height, self.width)
                    and not self.has_wall(nxt.y, nxt.x)
                    and nxt not in visited
                ):
                    visited.add(nxt)
                    queue.append((nxt, distance + 1))
        return INF

    def evaluate_potential_score(self) -> int:
        """Points a nearest-first walk could still collect in the remaining turns."""
        remaining = self.end_turn - self.turn
        if remaining <= 0:
            return 0
        targets = []
        for y, row in enumerate(self.points):
            for x, value in enumerate(row):
                if value > 0:
                    pos = Coord(y, x)
                    distance = self.bfs_distance(self.character, pos)
                    if distance < INF:
                        targets.append((distance, value, pos))
        targets.sort(key=lambda item: (item[0], item[1], item[2].y, item[2].x))

        potential = 0
        turns_used = 0
        here = self.character
        for _, value, pos in targets:
            distance = self.bfs_distance(here, pos)
            if turns_used + distance > remaining:
                break
            potential += value
            turns_used += distance
            here = pos
        return potential

    def evaluate_score(self) -> int:
        """Current score plus a weighted estimate of what is still reachable."""
        potential = self.evaluate_potential_score()
        self.evaluated_score = self.game_score + int(potential * _POTENTIAL_WEIGHT)
        return self.evaluated_score

    def clone(self) -> "WallMazeState":
        twin = WallMazeState.__new__(WallMazeState)
        twin.__dict__.update(self.__dict__)
        twin.points = [list(row) for row in self.points]
        twin.walls = [list(row) for row in self.walls]
        return twin

    def __str__(self) -> str:
        lines = [f"turn:\t{self.turn}\n", f"score:\t{self.game_score}\n"]
        for h in range(self.height):
            cells = []
            for w in range(self.width):
                if self.walls[h][w] == 1:
                    cells.append("#")
                elif self.character == Coord(h, w):
                    cells.append("@")
                elif self.points[h][w] > 0:
                    cells.append(str(self.points[h][w]))
                else:
                    cells.append(".")
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def __lt__(self, other: "WallMazeState") -> bool:
        return self.evaluated_score < other.evaluated_score