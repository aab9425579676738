"""Tracing module: records search and generation steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the search or generation process."""

    timestamp: float
    step_number: int
    action_type: str  # 'assign', 'backtrack', 'solution_found', 'budget_exceeded', 'removal_kept', ...
    row: Optional[int] = None
    col: Optional[int] = None
    digit: Optional[int] = None
    depth: Optional[int] = None  # number of digits placed by the search so far
    count: Optional[int] = None  # solutions found / givens remaining, depending on action
    reason: Optional[str] = None


class Tracer:
    """Records solver and generator steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_assign(self, row: int, col: int, digit: int, depth: int):
        """Log a digit placed by the search."""
        if not self.enabled:
            return
        self._record('assign', row=row, col=col, digit=digit, depth=depth)

    def log_backtrack(self, row: int, col: int, reason: str = "No valid digits"):
        """Log a cell whose candidates were exhausted."""
        if not self.enabled:
            return
        self._record('backtrack', row=row, col=col, reason=reason)

    def log_solution_found(self, count: int):
        """Log a completed grid; ``count`` is the running solution count."""
        if not self.enabled:
            return
        self._record('solution_found', count=count)

    def log_budget_exceeded(self, limit: int):
        if not self.enabled:
            return
        self._record('budget_exceeded', reason=f"Search limit of {limit} steps reached")

    def log_removal(self, row: int, col: int, digit: int, kept: bool, clues: int):
        """Log a tentative clue removal during puzzle generation."""
        if not self.enabled:
            return
        self._record(
            'removal_kept' if kept else 'removal_reverted',
            row=row,
            col=col,
            digit=digit,
            count=clues,
        )

    def log_attempt_failed(self, attempt: int, reason: str):
        if not self.enabled:
            return
        self._record('attempt_failed', count=attempt, reason=reason)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'row', 'col',
            'digit', 'depth', 'count', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_assignments': action_counts.get('assign', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
        }
