"""Tests for utilprog.search.fixed_point.optimize_to_fixed_point.

Run with: pytest test/test_fixed_point.py -v
"""

import json
import random
from pathlib import Path

import pytest
from conftest import SortednessUtility, SwapModifier

from utilprog.examples.number import Number, build_optimizer
from utilprog.search import ModifyOptimizer, OptimizationReport, optimize_to_fixed_point


def _number_optimizer(seed: int) -> ModifyOptimizer:
    """Number example optimizer: target 42, prime reward 5, +/-1 edits."""
    return build_optimizer(target=42, penalty=-1.0, reward=5.0, tries=1000, depth=20, rng=random.Random(seed))


class TestNumberFixedPoint:
    """The concrete number scenario terminates at a local optimum."""

    def test_terminates_at_best_neighbour_of_target(self) -> None:
        """Starting at 0 the run stops at a prime next to 42 with utility 4."""
        optimizer = _number_optimizer(seed=0)
        num = Number(0)
        rounds = optimize_to_fixed_point(optimizer, num)
        assert num.value in (41, 43)
        assert rounds[-1].utility == 4.0
        assert rounds[-1].obj == str(num)

    def test_result_is_fixed_point(self) -> None:
        """One more search call from the final state changes nothing."""
        optimizer = _number_optimizer(seed=1)
        num = Number(0)
        optimize_to_fixed_point(optimizer, num)
        final = num.value
        assert optimizer.modify(num) == []
        assert num.value == final

    def test_rounds_are_monotonic(self) -> None:
        """Every recorded round strictly improves on the previous one."""
        rounds = optimize_to_fixed_point(_number_optimizer(seed=2), Number(0))
        utilities = [r.utility for r in rounds]
        assert all(a < b for a, b in zip(utilities, utilities[1:]))

    def test_initial_round_recorded(self) -> None:
        """Round 0 is the starting object with no change applied."""
        rounds = optimize_to_fixed_point(_number_optimizer(seed=3), Number(0))
        assert rounds[0].index == 0
        assert rounds[0].obj == "0"
        assert rounds[0].utility == -42.0
        assert rounds[0].edits == 0
        assert rounds[0].change is None


class TestFixedPointOptions:
    """Tests for max_rounds, explicit utilities and reports."""

    def test_max_rounds_caps_run(self) -> None:
        """At most max_rounds optimizer rounds are recorded after round 0."""
        rounds = optimize_to_fixed_point(_number_optimizer(seed=0), Number(0), max_rounds=1)
        assert len(rounds) == 2

    def test_zero_max_rounds(self) -> None:
        """max_rounds=0 only records the starting object."""
        num = Number(0)
        rounds = optimize_to_fixed_point(_number_optimizer(seed=0), num, max_rounds=0)
        assert len(rounds) == 1
        assert num.value == 0

    def test_explicit_utility_for_plain_modifier(self, rng: random.Random) -> None:
        """A modifier without a utility attribute can be driven with an explicit utility."""
        values = [3, 2, 1, 0]
        rounds = optimize_to_fixed_point(SwapModifier(rng), values, utility=SortednessUtility(), max_rounds=3)
        assert len(rounds) <= 4
        assert all(r.edits == 1 for r in rounds[1:])

    def test_missing_utility_rejected(self, rng: random.Random) -> None:
        """Without any utility to report there is nothing to log."""
        with pytest.raises(ValueError, match="needs a utility"):
            optimize_to_fixed_point(SwapModifier(rng), [1, 0])

    def test_report_mirrors_rounds(self, tmp_path: Path) -> None:
        """Each round lands in the JSON report and the summary is written at the end."""
        report = OptimizationReport(tmp_path / "report.json")
        rounds = optimize_to_fixed_point(_number_optimizer(seed=0), Number(0), report=report)
        data = json.loads((tmp_path / "report.json").read_text())
        assert [r["utility"] for r in data["rounds"]] == [r.utility for r in rounds]
        assert data["summary"]["rounds"] == len(rounds)
        assert data["summary"]["final_utility"] == 4.0
        assert data["summary"]["reached_fixed_point"] is True
        assert data["summary"]["total_edits"] == sum(r.edits for r in rounds)
