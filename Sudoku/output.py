import json
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from .board import Board, Solution, render_values


# -----------------------------------------------------------------------------
# Reporters
# -----------------------------------------------------------------------------
class Reporter:
    """
    Receives notifications from loading and searching.

    Every hook is a no-op here; subclasses override what they need. Hooks
    are called inline and must return promptly.
    """

    def on_parsed(self, board: Board) -> None:
        pass

    def on_progress(self, stats, partial: Solution) -> None:
        pass

    def on_solution(self, solution: Solution, stats) -> None:
        pass

    def on_error(self, err: Exception) -> None:
        pass

    def on_done(self, stats) -> None:
        pass


class ConsoleReporter(Reporter):
    """Prints boards, solutions and stats lines to stdout"""

    def __init__(self, show_progress: bool = True):
        self.show_progress = show_progress

    def on_parsed(self, board: Board) -> None:
        print(SolutionFormatter.format_board(board, blank='-'))

    def on_progress(self, stats, partial: Solution) -> None:
        if self.show_progress:
            print(json.dumps(stats.as_dict()))
            print(partial)

    def on_solution(self, solution: Solution, stats) -> None:
        print('solution:')
        print(solution)

    def on_error(self, err: Exception) -> None:
        print(f"Error: {err}")

    def on_done(self, stats) -> None:
        print(json.dumps(stats.as_dict()))


class RecordingReporter(Reporter):
    """Keeps every notification in order, for tests and comparisons"""

    def __init__(self):
        self.events: List[tuple] = []
        self.solutions: List[Solution] = []
        self.progress: List[Dict] = []
        self.errors: List[Exception] = []
        self.done: Optional[Dict] = None

    def on_parsed(self, board: Board) -> None:
        self.events.append(('parsed', board.snapshot()))

    def on_progress(self, stats, partial: Solution) -> None:
        self.progress.append(stats.as_dict())
        self.events.append(('progress', stats.as_dict()))

    def on_solution(self, solution: Solution, stats) -> None:
        self.solutions.append(solution)
        self.events.append(('solution', stats.as_dict()))

    def on_error(self, err: Exception) -> None:
        self.errors.append(err)
        self.events.append(('error', err))

    def on_done(self, stats) -> None:
        self.done = stats.as_dict()
        self.events.append(('done', self.done))


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------
class SolutionFormatter:
    """Formats puzzle solutions for output"""

    @staticmethod
    def format_board(board, blank: Optional[str] = None) -> str:
        """Board or Solution as text; rows end with a newline."""
        return render_values(board.values, board.size, blank=blank)

    @staticmethod
    def format_solution_json(board: Board, result) -> Dict:
        """
        Format a finished search as JSON
        """
        return {
            'puzzle_info': {
                'size': board.size,
                'givens': board.filled_count(),
                'status': result.status,
                'solutions_found': result.solutions_found,
                'timestamp': datetime.now().isoformat()
            },
            'solving_stats': dict(result.stats.as_dict(), elapsed=round(result.elapsed, 4)),
            'puzzle': board.grid.tolist(),
            'solutions': [s.to_list() for s in result.solutions],
        }

    @staticmethod
    def format_solution_human_readable(board: Board, solutions: Sequence[Solution]) -> str:
        lines = []
        lines.append("=" * 60)
        lines.append(f"SUDOKU {board.size}x{board.size}")
        lines.append("=" * 60)
        lines.append(SolutionFormatter.format_board(board, blank='-'))
        lines.append(f"{len(solutions)} solutions")
        for i, solution in enumerate(solutions, 1):
            lines.append("-" * 60)
            lines.append(f"Solution {i}:")
            lines.append(SolutionFormatter.format_board(solution))
        lines.append("=" * 60)
        return "\n".join(lines)

    @staticmethod
    def save_solution(board: Board, result, output_path: str):
        """
        Save solution to JSON file
        """
        data = SolutionFormatter.format_solution_json(board, result)

        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2)

        print(f"\n✓ Solution saved to: {output_path}")

    @staticmethod
    def save_human_readable(board: Board, solutions: Sequence[Solution], output_path: str):
        text = SolutionFormatter.format_solution_human_readable(board, solutions)

        with open(output_path, 'w') as f:
            f.write(text)

        print(f"✓ Human-readable solution saved to: {output_path}")
