"""Play the walled maze with simple policies and compare them over many games."""

from __future__ import annotations

import heapq
import itertools
import sys
import time
from typing import Callable, TextIO

from .core import MT19937
from .wallmaze import WallMazeState

__all__ = [
    "random_action",
    "greedy_action",
    "beam_search_action",
    "play_game",
    "benchmark_algorithms",
    "main",
]

Policy = Callable[[WallMazeState], int]

BEAM_WIDTH = 100
BEAM_DEPTH = 10

_USAGE = (
    "usage: wallmaze_play [options]\n"
    "options:\n"
    "  --mode MODE      run mode (play or benchmark)\n"
    "  --algo ALGO      algorithm (random, greedy, beam)\n"
    "  --games N        number of games in benchmark mode\n"
    "  --seed N         seed for building the game\n"
    "  --help           show this help message"
)


def random_action(state: WallMazeState, rng: MT19937) -> int:
    """A uniformly drawn legal move, or -1 when the character cannot move."""
    actions = state.legal_actions()
    if not actions:
        return -1
    return actions[rng() % len(actions)]


def greedy_action(state: WallMazeState, rng: MT19937) -> int:
    """The legal move whose next state has the highest game score; -1 if none exists."""
    actions = state.legal_actions()
    if not actions:
        return -1
    best_action = -1
    best_score = -1
    for action in actions:
        trial = state.clone()
        trial.progress(action)
        if trial.game_score > best_score:
            best_score = trial.game_score
            best_action = action
    if best_action == -1:
        return actions[rng() % len(actions)]
    return best_action


def beam_search_action(
    state: WallMazeState, beam_width: int, search_depth: int, rng: MT19937
) -> int:
    """First move of the best line found by a beam search over evaluated states."""
    order = itertools.count()
    beam = [(-state.evaluated_score, next(order), state)]
    best = WallMazeState()
    for depth in range(search_depth):
        next_beam: list[tuple[int, int, WallMazeState]] = []
        for _ in range(beam_width):
            if not beam:
                break
            _, _, current = heapq.heappop(beam)
            for action in current.legal_actions():
                child = current.clone()
                child.progress(action)
                child.evaluate_score()
                if depth == 0:
                    child.first_action = action
                heapq.heappush(next_beam, (-child.evaluated_score, next(order), child))
        beam = next_beam
        if not beam:
            break
        best = beam[0][2]
        if best.is_done():
            break
    if best.first_action != -1:
        return best.first_action
    return random_action(state, rng)


def _policies(rng: MT19937) -> dict[str, Policy]:
    return {
        "random": lambda state: random_action(state, rng),
        "greedy": lambda state: greedy_action(state, rng),
        "beam": lambda state: beam_search_action(state, BEAM_WIDTH, BEAM_DEPTH, rng),
    }


def _play_out(state: WallMazeState, policy: Policy) -> None:
    while not state.is_done():
        state.progress(policy(state))


def play_game(algorithm_name: str, rng: MT19937, out: TextIO | None = None) -> int:
    """Play one game, printing every state, and return the final score."""
    out = sys.stdout if out is None else out
    policy = _policies(rng).get(algorithm_name)
    if policy is None:
        print(f"Unknown algorithm: {algorithm_name}. Using random instead.", file=out)
        policy = lambda state: random_action(state, rng)  # noqa: E731

    state = WallMazeState(rng)
    print(f"Starting game with {algorithm_name} algorithm...", file=out)
    print(state, file=out)
    while not state.is_done():
        state.progress(policy(state))
        print(state, file=out)
    print(f"Game finished! Final score: {state.game_score}", file=out)
    return state.game_score


def benchmark_algorithms(
    num_games: int, rng: MT19937, out: TextIO | None = None
) -> dict[str, tuple[float, float]]:
    """Play every policy on the same boards; return average score and time (ms) by name."""
    if num_games <= 0:
        raise ValueError("num_games must be positive")
    out = sys.stdout if out is None else out
    policies = _policies(rng)
    named = {
        "Beam Search": policies["beam"],
        "Greedy": policies["greedy"],
        "Random": policies["random"],
    }
    total_scores = dict.fromkeys(named, 0.0)
    total_times = dict.fromkeys(named, 0.0)

    print(f"Running benchmark over {num_games} games each...", file=out)
    for seed in range(num_games):
        for name, policy in named.items():
            state = WallMazeState(rng)
            start = time.perf_counter_ns()
            _play_out(state, policy)
            elapsed_ms = (time.perf_counter_ns() - start) // 1_000_000
            total_scores[name] += state.game_score
            total_times[name] += elapsed_ms
        if (seed + 1) % 10 == 0 or seed == num_games - 1:
            print(f"Progress: {seed + 1}/{num_games} games done", file=out)

    print("\n===== Algorithm benchmark results =====", file=out)
    print(f"{'Algorithm':<15}{'Avg score':<15}{'Avg time':<15}", file=out)
    print("-" * 45, file=out)
    results = {}
    for name in named:
        avg_score = total_scores[name] / num_games
        avg_time = total_times[name] / num_games
        results[name] = (avg_score, avg_time)
        print(f"{name:<15}{avg_score:<15.2f}{avg_time:<15.2f}ms", file=out)
    return results


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    rng = MT19937(0)
    seed = rng()
    seed_given = False
    mode = "play"
    algorithm = "beam"
    games = 50

    tokens = iter(args)
    for arg in tokens:
        if arg in ("--mode", "--algo", "--games", "--seed"):
            value = next(tokens, None)
            if value is None:
                break
            if arg == "--mode":
                mode = value
            elif arg == "--algo":
                algorithm = value
            elif arg == "--games":
                games = int(value)
            else:
                seed = int(value)
                seed_given = True
        elif arg == "--help":
            print(_USAGE)
            return 0

    if mode == "play":
        play_game(algorithm, MT19937(seed) if seed_given else rng)
    elif mode == "benchmark":
        benchmark_algorithms(games, rng)
    else:
        print(f"Unknown mode: {mode}\nValid modes: play, benchmark")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())