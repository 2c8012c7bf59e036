"""Run an optimizer until it stops changing the object.

Each round invokes the optimizer once on the same object. The run stops
when a round leaves the object equal to its pre-round snapshot, which is a
local optimum under the optimizer's modifier and search budget.
"""

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from utilprog.capabilities.modifier import Modifier
from utilprog.capabilities.utility import Utility
from utilprog.search.report import OptimizationReport

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RoundRecord:
    """Outcome of one optimization round.

    Attributes:
        index: Round number. Round 0 is the initial object before any search.
        obj: Text form of the object after the round.
        utility: Utility of the object after the round.
        edits: Number of edits the round applied.
        change: Change record returned by the optimizer (``None`` for round 0).
    """

    index: int
    obj: str
    utility: float
    edits: int
    change: Any = None


def _record_round(
    rounds: list[RoundRecord], obj: Any, utility: float, change: Any, report: OptimizationReport | None
) -> None:
    """Append a round, log it, and mirror it into the report."""
    if change is None:
        edits = 0
    else:
        edits = len(change) if isinstance(change, list) else 1
    record = RoundRecord(index=len(rounds), obj=str(obj), utility=utility, edits=edits, change=change)
    rounds.append(record)
    logger.info("%s, utility %s", record.obj, record.utility)
    if report is not None:
        report.add_round(record.index, record.obj, record.utility, record.edits)


def optimize_to_fixed_point(
    optimizer: Modifier[T, Any],
    obj: T,
    utility: Utility[T] | None = None,
    max_rounds: int | None = None,
    snapshot: Callable[[T], Any] = copy.deepcopy,
    report: OptimizationReport | None = None,
) -> list[RoundRecord]:
    """Repeatedly optimize ``obj`` in place until a round makes no change.

    Args:
        optimizer: Optimizer (any modifier) to apply each round.
        obj: Object to optimize in place.
        utility: Utility used for reporting. Defaults to ``optimizer.utility``.
        max_rounds: Optional cap on optimizer rounds. ``None`` runs to the fixed point.
        snapshot: Produces a comparable copy of ``obj`` before each round.
        report: Optional JSON report to mirror rounds into.

    Returns:
        One record per round, starting with round 0 for the initial object.

    Raises:
        ValueError: If no utility is given and the optimizer has none.
    """
    if utility is None:
        utility = getattr(optimizer, "utility", None)
        if utility is None:
            raise ValueError("optimize_to_fixed_point needs a utility when the optimizer has none")

    rounds: list[RoundRecord] = []
    _record_round(rounds, obj, utility.utility(obj), None, report)
    reached_fixed_point = False
    while max_rounds is None or len(rounds) <= max_rounds:
        old = snapshot(obj)
        change = optimizer.modify(obj)
        if obj == old:
            reached_fixed_point = True
            break
        _record_round(rounds, obj, utility.utility(obj), change, report)

    logger.info(
        "Optimization %s after %d rounds: utility %s -> %s",
        "reached fixed point" if reached_fixed_point else "stopped",
        len(rounds) - 1,
        rounds[0].utility,
        rounds[-1].utility,
    )
    if report is not None:
        report.set_summary(reached_fixed_point)
    return rounds
