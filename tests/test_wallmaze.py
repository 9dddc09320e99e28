import pytest

from mazearena.core import BOARD_HEIGHT, BOARD_WIDTH, END_TURN, INF, MT19937, Coord, step
from mazearena.wallmaze import WallMazeState


def _empty(end_turn=END_TURN):
    return WallMazeState(None, BOARD_HEIGHT, BOARD_WIDTH, end_turn)


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
def test_construction_is_deterministic(seed):
    a = WallMazeState(MT19937(seed))
    b = WallMazeState(MT19937(seed))
    assert a.points == b.points
    assert a.walls == b.walls
    assert a.character == b.character


def test_construction_leaves_generator_untouched():
    rng = MT19937(3)
    WallMazeState(rng)
    assert rng() == MT19937(3)()


@pytest.mark.parametrize("seed", range(20))
def test_character_cell_is_open_and_empty(seed):
    state = WallMazeState(MT19937(seed))
    c = state.character
    assert 0 <= c.y < BOARD_HEIGHT and 0 <= c.x < BOARD_WIDTH
    assert not state.has_wall(c.y, c.x)
    assert state.points[c.y][c.x] == 0
    assert all(0 <= v <= 9 for row in state.points for v in row)


@pytest.mark.parametrize("seed", range(20))
def test_legal_actions_avoid_walls_and_edges(seed):
    state = WallMazeState(MT19937(seed))
    for action in state.legal_actions():
        target = step(state.character, action)
        assert 0 <= target.y < BOARD_HEIGHT and 0 <= target.x < BOARD_WIDTH
        assert not state.has_wall(target.y, target.x)
    for action in set(range(4)) - set(state.legal_actions()):
        target = step(state.character, action)
        off = not (0 <= target.y < BOARD_HEIGHT and 0 <= target.x < BOARD_WIDTH)
        assert off or state.has_wall(target.y, target.x)


def test_progress_off_board_raises():
    state = _empty()
    with pytest.raises(ValueError):
        state.progress(1)


def test_progress_collects_point_and_clears_cell():
    state = _empty()
    state.points[0][1] = 6
    state.progress(0)
    assert state.character == Coord(0, 1)
    assert state.game_score == 6
    assert state.points[0][1] == 0
    assert state.turn == 1


@pytest.mark.parametrize("seed", range(10))
def test_game_ends_after_end_turn_moves(seed):
    state = WallMazeState(MT19937(seed))
    total = sum(map(sum, state.points))
    moves = 0
    while not state.is_done():
        state.progress(state.legal_actions()[0])
        moves += 1
    assert moves == END_TURN
    assert state.game_score == total - sum(map(sum, state.points))


def test_bfs_distance_on_open_board():
    state = _empty()
    assert state.bfs_distance(Coord(2, 2), Coord(2, 2)) == 0
    assert state.bfs_distance(Coord(0, 0), Coord(4, 4)) == 8


def test_bfs_distance_blocked_by_walls():
    state = _empty()
    state.walls[0][1] = 1
    state.walls[1][0] = 1
    assert state.bfs_distance(Coord(0, 0), Coord(4, 4)) == INF
    assert state.bfs_distance(Coord(4, 4), Coord(0, 0)) == INF


def test_potential_score_counts_reachable_point():
    state = _empty()
    state.points[0][2] = 7
    assert state.evaluate_potential_score() == 7


def test_potential_score_ignores_out_of_range_points():
    state = _empty(end_turn=1)
    state.points[0][2] = 7
    assert state.evaluate_potential_score() == 0


def test_potential_score_ignores_walled_off_points():
    state = _empty()
    state.points[0][2] = 7
    state.walls[0][1] = 1
    state.walls[1][0] = 1
    assert state.evaluate_potential_score() == 0


def test_potential_score_zero_when_done():
    state = _empty(end_turn=1)
    state.points[0][1] = 3
    state.progress(0)
    assert state.is_done()
    assert state.evaluate_potential_score() == 0
    assert state.evaluate_score() == state.game_score


def test_evaluate_score_weights_potential():
    state = _empty()
    state.points[0][2] = 5
    assert state.evaluate_score() == 4
    assert state.evaluated_score == 4


@pytest.mark.parametrize("seed", range(10))
def test_evaluate_score_not_below_game_score(seed):
    state = WallMazeState(MT19937(seed))
    state.progress(state.legal_actions()[0])
    assert state.evaluate_score() >= state.game_score


def test_clone_is_independent():
    state = WallMazeState(MT19937(5))
    twin = state.clone()
    twin.progress(twin.legal_actions()[0])
    twin.walls[0][0] = 1
    assert state.turn == 0
    assert twin.turn == 1
    assert state.walls != twin.walls or state.walls[0][0] == 1
    assert twin.points is not state.points


def test_less_than_compares_evaluated_score():
    low = _empty()
    high = _empty()
    high.points[0][1] = 9
    low.evaluate_score()
    high.evaluate_score()
    assert low < high
    assert not high < low


def test_str_renders_walls_character_and_points():
    state = _empty()
    state.walls[0][1] = 1
    state.points[0][2] = 3
    text = str(state)
    lines = text.splitlines()
    assert lines[0] == "turn:\t0"
    assert lines[1] == "score:\t0"
    assert lines[2] == "@#3.."
    assert lines[3] == "....."
    assert len(lines) == 2 + BOARD_HEIGHT


def test_str_wall_takes_precedence_over_points():
    state = _empty()
    state.walls[2][2] = 1
    state.points[2][2] = 4
    assert str(state).splitlines()[4] == "..#.."