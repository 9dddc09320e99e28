import io
import math

import pytest

from mazearena import wallmaze_bench as bench
from mazearena.core import MT19937
from mazearena.wallmaze_play import greedy_action


def greedy_policy():
    rng = MT19937(0)
    return lambda state: greedy_action(state, rng)


def test_performance_statistics_are_consistent():
    result = bench.test_algorithm_performance("Greedy", greedy_policy(), 3, False, io.StringIO())
    assert len(result.scores) == 3
    assert result.min_score <= result.avg_score <= result.max_score
    assert result.avg_score == pytest.approx(sum(result.scores) / 3)
    assert result.min_score == min(result.scores)
    assert result.max_score == max(result.scores)
    assert result.std_dev >= 0
    assert result.avg_time_ms >= 0


def test_std_dev_matches_scores():
    result = bench.test_algorithm_performance("Greedy", greedy_policy(), 4, False, io.StringIO())
    variance = sum((s - result.avg_score) ** 2 for s in result.scores) / len(result.scores)
    assert result.std_dev == pytest.approx(math.sqrt(variance))


def test_performance_is_reproducible():
    first = bench.test_algorithm_performance("Greedy", greedy_policy(), 3, False, io.StringIO())
    second = bench.test_algorithm_performance("Greedy", greedy_policy(), 3, False, io.StringIO())
    assert first.scores == second.scores


def test_verbose_output_names_algorithm():
    out = io.StringIO()
    bench.test_algorithm_performance("Greedy", greedy_policy(), 2, True, out)
    text = out.getvalue()
    assert text.startswith("Greedy: running 2 games...")
    assert "done: average score" in text


def test_quiet_run_prints_nothing():
    out = io.StringIO()
    bench.test_algorithm_performance("Greedy", greedy_policy(), 2, False, out)
    assert out.getvalue() == ""


def test_performance_rejects_no_games():
    with pytest.raises(ValueError):
        bench.test_algorithm_performance("Greedy", greedy_policy(), 0, False, io.StringIO())


def test_beam_benchmark_rejects_no_games():
    with pytest.raises(ValueError):
        bench.beam_parameter_benchmark(0, MT19937(0), io.StringIO())


def test_evaluation_comparison_reports_both_policies():
    out = io.StringIO()
    basic, enhanced = bench.evaluation_function_test(2, MT19937(0), out)
    greedy = bench.test_algorithm_performance("Greedy", greedy_policy(), 2, False, io.StringIO())
    assert basic.scores == greedy.scores
    assert len(enhanced.scores) == 2
    text = out.getvalue()
    assert "Basic evaluation" in text
    assert "BFS evaluation improvement:" in text


def test_main_help(capsys):
    assert bench.main(["--help"]) == 0
    assert "--tests" in capsys.readouterr().out


def test_main_unknown_mode_only_prints_header(capsys):
    assert bench.main(["--mode", "nothing", "--tests", "3"]) == 0
    text = capsys.readouterr().out
    assert "3 games per test" in text
    assert "Algorithm comparison" not in text


def test_main_evaluation_mode(capsys):
    assert bench.main(["--mode", "evaluation", "--tests", "2"]) == 0
    assert "Evaluation function comparison" in capsys.readouterr().out