import numpy as np
import pytest

from Sudoku import BoardInconsistent, RecordingReporter, Solution, Solver
from Sudoku.diagnostics import is_valid_solution
from Sudoku.loader import load_puzzle


UNSATISFIABLE = "123456780" + "000000009" + "0" * 63


def test_first_solution_matches_known_answer(classic, classic_solution):
    result = Solver(load_puzzle(classic), max_solutions=1).solve()
    assert result.status == 'solved'
    assert result.solution.values.tolist() == classic_solution


def test_unique_puzzle_has_one_solution(classic, classic_solution):
    reporter = RecordingReporter()
    result = Solver(load_puzzle(classic), reporter=reporter).solve()
    assert result.solutions_found == 1
    assert len(reporter.solutions) == 1
    assert reporter.solutions[0].values.tolist() == classic_solution
    assert not result.cancelled


@pytest.mark.parametrize("ordering", ['mrv', 'insertion', 'dynamic'])
def test_every_ordering_finds_the_same_solution(classic, classic_solution, ordering):
    result = Solver(load_puzzle(classic), ordering=ordering).solve()
    assert result.solutions_found == 1
    assert result.solution.values.tolist() == classic_solution


def test_empty_board_gets_filled():
    result = Solver(load_puzzle("-" * 81), max_solutions=1).solve()
    solution = result.solution
    assert solution.is_complete()
    assert np.count_nonzero(solution.values) == 81
    assert is_valid_solution(solution)


def test_empty_4x4_has_288_solutions():
    result = Solver(load_puzzle("0" * 16, size=4)).solve()
    assert result.solutions_found == 288
    assert len(set(result.solutions)) == 288
    assert all(is_valid_solution(s) for s in result.solutions)


def test_conflicting_given_fails_before_search():
    with pytest.raises(BoardInconsistent):
        load_puzzle("5" + "0" * 7 + "5" + "0" * 72)


def test_unsatisfiable_puzzle_is_exhausted():
    reporter = RecordingReporter()
    result = Solver(load_puzzle(UNSATISFIABLE), reporter=reporter).solve()
    assert result.status == 'exhausted'
    assert result.solutions == []
    assert reporter.done == result.stats.as_dict()


def test_board_restored_after_search(classic):
    puzzle = load_puzzle(classic)
    before = puzzle.board.values.copy()
    masks = list(puzzle.board.rows.masks)
    unsolved = set(puzzle.unsolved)

    Solver(puzzle).solve()

    assert np.array_equal(puzzle.board.values, before)
    assert puzzle.board.rows.masks == masks
    assert set(puzzle.unsolved) == unsolved


def test_solutions_survive_backtracking(classic, classic_solution):
    puzzle = load_puzzle(classic)
    result = Solver(puzzle, max_solutions=1).solve()
    assert puzzle.board.filled_count() == 30
    assert result.solution.values.tolist() == classic_solution


def test_mrv_sorts_by_candidate_count(classic):
    puzzle = load_puzzle(classic)
    Solver(puzzle, max_solutions=1).solve()
    counts = [puzzle.board.candidate_count(c) for c in puzzle.unsolved]
    assert counts == sorted(counts)


def test_progress_stats_are_monotonic(classic):
    reporter = RecordingReporter()
    Solver(load_puzzle(classic), reporter=reporter, ordering='insertion',
           progress_interval=10).solve()

    assert reporter.progress
    previous = {'depth': 0, 'checks': 0, 'calls': 0}
    for stats in reporter.progress + [reporter.done]:
        assert stats['calls'] >= stats['depth']
        for key in previous:
            assert stats[key] >= previous[key]
        previous = stats
    assert reporter.events[-1][0] == 'done'


def test_stats_reset_between_runs(classic):
    solver = Solver(load_puzzle(classic))
    first = solver.solve()
    second = solver.solve()
    assert first.stats == second.stats
    assert second.solutions_found == 1


def test_should_stop_cancels_search():
    puzzle = load_puzzle("0" * 81)
    result = Solver(puzzle).solve(should_stop=lambda: True)
    assert result.status == 'cancelled'
    assert result.cancelled
    assert result.stats.calls == 0
    assert puzzle.board.filled_count() == 0


def test_cancel_from_reporter():
    class StopAfterThree(RecordingReporter):
        def on_solution(self, solution, stats):
            super().on_solution(solution, stats)
            if len(self.solutions) == 3:
                solver.cancel()

    reporter = StopAfterThree()
    puzzle = load_puzzle("0" * 81)
    solver = Solver(puzzle, reporter=reporter)
    result = solver.solve()

    assert result.solutions_found == 3
    assert result.cancelled
    assert result.status == 'solved'
    assert puzzle.board.filled_count() == 0


def test_invalid_arguments(classic):
    with pytest.raises(ValueError):
        Solver(load_puzzle(classic), ordering='random')
    with pytest.raises(ValueError):
        Solver(load_puzzle(classic), max_solutions=0)


def test_zero_timeout_cancels_search():
    puzzle = load_puzzle("0" * 81)
    result = Solver(puzzle).solve(timeout_seconds=0)
    assert result.status == 'cancelled'
    assert result.cancelled
    assert result.solutions == []
    assert puzzle.board.filled_count() == 0
    assert len(puzzle.unsolved) == 81


def test_cancel_before_solve_is_cleared(classic):
    solver = Solver(load_puzzle(classic))
    solver.cancel()
    result = solver.solve()
    assert result.status == 'solved'
    assert not result.cancelled


def test_solutions_counted_when_not_kept(classic):
    reporter = RecordingReporter()
    result = Solver(load_puzzle(classic), reporter=reporter, keep_solutions=False).solve()
    assert result.solutions_found == 1
    assert result.solutions == []
    assert result.solution is None
    assert len(reporter.solutions) == 1


def test_progress_reports_partial_boards(classic):
    partials = []

    class KeepPartials(RecordingReporter):
        def on_progress(self, stats, partial):
            super().on_progress(stats, partial)
            partials.append(partial)

    Solver(load_puzzle(classic), reporter=KeepPartials(), ordering='insertion',
           progress_interval=5).solve()

    assert partials
    assert all(isinstance(p, Solution) for p in partials)
    assert not partials[0].is_complete()
    assert np.count_nonzero(partials[0].values) >= 30
