# mazearena

A set of small, deterministic grid maze games for experimenting with
game-playing algorithms, plus a few ready-made agents and benchmarks for the
walled maze.

All randomness comes from `mazearena.core.MT19937`, a 32-bit Mersenne
Twister, so the same seed always gives the same board.

## The games

| Module               | Class           | Description                                                                                     |
|----------------------|-----------------|-------------------------------------------------------------------------------------------------|
| `mazearena.maze`     | `MazeState`     | One character walks the board collecting points until the turn limit.                          |
| `mazearena.automaze` | `AutoMazeState` | Characters are placed with `set_character`, then each walks to its best neighbouring point.     |
| `mazearena.twomaze`  | `TwoMazeState`  | Two players take turns moving; whoever collects more points wins.                               |
| `mazearena.simmaze`  | `SimMazeState`  | Two players move at the same time on a mirrored board; landing on the same cell scores nothing. |
| `mazearena.wallmaze` | `WallMazeState` | One character on a board with walls, evaluated with a shortest-path estimate of future score.   |

`MazeState` and `AutoMazeState` take an integer seed; `TwoMazeState`,
`SimMazeState` and `WallMazeState` take an `MT19937` generator (they work on a
copy of it, so the generator passed in is not advanced).

Shared pieces live in `mazearena.core`: `MT19937`, `Coord`, `Direction`,
`WinningStatus`, `step`, `is_valid_coord` and `generate_random_points`.

Every state offers `is_done()`, `legal_actions()`, `progress(action)`,
`evaluate_score()` and `clone()`; `str(state)` renders the board. States
compare by their evaluated score, so they can be sorted or kept in a heap.
Moving off the board raises `ValueError`.

The two-player states also provide `winning_status()` and `score_rate()`.
`SimMazeState` additionally has `advance(action0, action1)`,
`player_score(player_id)` and `legal_actions(player_id)`; a single
`progress` action packs both moves, see `encode_actions` and
`decode_actions`.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Playing a game from Python

```python
from mazearena.maze import MazeState

state = MazeState(0)
print(state)
while not state.is_done():
    state.progress(state.legal_actions()[0])
    print(state)
```

```python
from mazearena.core import MT19937, WinningStatus
from mazearena.twomaze import TwoMazeState

state = TwoMazeState(MT19937(0))
while not state.is_done():
    state.progress(state.legal_actions()[0])
print(state.winning_status() is WinningStatus.WIN)
```

## Wall maze agents

`mazearena.wallmaze_play` provides three agents for the walled maze, each
taking the state and an `MT19937` for tie-breaking or fallback:

- `random_action(state, rng)`: a uniformly chosen legal move.
- `greedy_action(state, rng)`: the move giving the highest game score after one step.
- `beam_search_action(state, beam_width, search_depth, rng)`: the first move of
  the best line found by a beam search ranked by `WallMazeState.evaluate_score`.

`play_game` plays one printed game and `benchmark_algorithms` averages score
and time for all three agents. `mazearena.wallmaze_bench` holds
`test_algorithm_performance` (returns an `AlgorithmPerformance` with average,
minimum, maximum and standard deviation of scores), `beam_parameter_benchmark`
and `evaluation_function_test`.

## Command-line tools

Play one walled maze game, printing the board after every move:

```
mazearena-wallmaze --mode play --algo beam --seed 42
```

- `--mode MODE`: `play` (default) or `benchmark`
- `--algo ALGO`: `random`, `greedy` or `beam` (default `beam`); an unknown name falls back to random
- `--games N`: number of games in benchmark mode (default 50)
- `--seed N`: seed for the board in play mode

Compare the three agents over many games:

```
mazearena-wallmaze --mode benchmark --games 20
```

Run the fuller benchmark suite: agent comparison, a sweep of beam widths
(10, 50, 100, 200) and depths (5, 10, 15, 20), and greedy play on game score
against greedy play on the shortest-path evaluation:

```
mazearena-wallmaze-bench --mode all --tests 50
```

`--mode` accepts `all`, `algorithms`, `beams` or `evaluation`; `--tests N`
sets how many games each measurement plays (default 50; the beam sweep uses
half as many).

## What the package does not do

Only the walled maze comes with agents and commands. The other four games are
game states only: there are no search agents (such as minimax or Monte Carlo
players) and no command-line tools for `MazeState`, `AutoMazeState`,
`TwoMazeState` or `SimMazeState`; you bring your own agent.

## Running the tests

```
pytest
```