"""Structured JSON report for fixed-point optimization runs.

Manages a live-overwritten JSON file that tracks every optimization round
and a final summary, and renders the rounds as a tabulate table.
"""

import json
from pathlib import Path
from typing import Any

from tabulate import tabulate

_EMPTY_REPORT: dict[str, Any] = {
    "summary": {
        "rounds": 0,
        "start_utility": None,
        "final_utility": None,
        "total_edits": 0,
        "reached_fixed_point": False,
    },
    "rounds": [],
}


class OptimizationReport:
    """Manages a live JSON report file for a fixed-point optimization run.

    Attributes:
        path: Path to the JSON report file.
    """

    def __init__(self, path: Path) -> None:
        """Initialize an empty report and write it to disk.

        Args:
            path: File path for the JSON report.
        """
        self.path = path
        self._data: dict[str, Any] = json.loads(json.dumps(_EMPTY_REPORT))
        self._write()

    @property
    def rounds(self) -> list[dict[str, Any]]:
        """Round entries recorded so far."""
        return self._data["rounds"]

    @property
    def summary(self) -> dict[str, Any]:
        """Summary section of the report."""
        return self._data["summary"]

    def add_round(self, index: int, obj: str, utility: float, edits: int) -> None:
        """Append a round entry.

        Args:
            index: Round number, starting at 0 for the initial object.
            obj: Text form of the object after the round.
            utility: Utility of the object after the round.
            edits: Number of edits the round applied.
        """
        self._data["rounds"].append({"round": index, "object": obj, "utility": utility, "edits": edits})
        self._write()

    def set_summary(self, reached_fixed_point: bool) -> None:
        """Recompute the summary section from the recorded rounds.

        Args:
            reached_fixed_point: Whether the run stopped because a round made no change.
        """
        rounds = self._data["rounds"]
        self._data["summary"] = {
            "rounds": len(rounds),
            "start_utility": rounds[0]["utility"] if rounds else None,
            "final_utility": rounds[-1]["utility"] if rounds else None,
            "total_edits": sum(r["edits"] for r in rounds),
            "reached_fixed_point": reached_fixed_point,
        }
        self._write()

    def table(self) -> str:
        """Render the recorded rounds as a tabulate ``simple`` table."""
        rows = [[r["round"], r["object"], r["utility"], r["edits"]] for r in self._data["rounds"]]
        return tabulate(rows, headers=["round", "object", "utility", "edits"], tablefmt="simple", floatfmt=".4f")

    def _write(self) -> None:
        """Atomically write the report to disk."""
        tmp_path = self.path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(self._data, indent=2) + "\n")
        tmp_path.rename(self.path)
