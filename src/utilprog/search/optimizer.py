"""Multi-restart bounded-depth hill climbing.

``ModifyOptimizer`` repeatedly applies random edits to an object, keeps the
best-scoring edit sequence seen, and backtracks through exact ``undo`` calls.
Every attempt restarts from the same baseline object, so attempts are
independent samples of the neighbourhood around the starting state.

The optimizer is itself a ``Modifier``: its change record is the list of
sub-records that reaches the best state, so an enclosing caller can undo or
redo the whole search outcome, and one optimizer can drive another.
"""

import logging
from dataclasses import dataclass
from typing import Any, TypeVar

from tqdm import tqdm

from utilprog.capabilities.modifier import Modifier
from utilprog.capabilities.utility import Utility

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ModifyOptimizer(Modifier[T, list]):
    """Modifies an object using a modifier by maximizing utility.

    Attributes:
        modifier: Modifier used to make trial edits.
        utility: Utility to maximize.
        tries: Number of restart attempts before giving up.
        depth: Number of consecutive edits per attempt before backtracking.
        progress: Show a tqdm progress bar over attempts.

    Raises:
        ValueError: If ``tries`` or ``depth`` is negative.
    """

    modifier: Modifier[T, Any]
    utility: Utility[T]
    tries: int
    depth: int
    progress: bool = False

    def __post_init__(self) -> None:
        """Reject negative search budgets. Zero is a legal no-op."""
        if self.tries < 0:
            raise ValueError(f"tries must be non-negative, got {self.tries}")
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

    def modify(self, obj: T) -> list:
        """Search for a better state and leave ``obj`` in it.

        The starting utility is the floor: if no attempt finds a strictly
        higher utility, ``obj`` is left unchanged and the record is empty.

        Args:
            obj: Object to optimize in place.

        Returns:
            Sub-records of the best attempt, in application order.
        """
        best: list = []
        start_utility = self.utility.utility(obj)
        best_utility = start_utility
        stack: list = []
        attempts = tqdm(range(self.tries), desc="Optimizing", unit="tries", disable=not self.progress, leave=False)
        for attempt in attempts:
            for _ in range(self.depth):
                stack.append(self.modifier.modify(obj))
                utility = self.utility.utility(obj)
                if best_utility < utility:
                    best = list(stack)
                    best_utility = utility
                    logger.debug("Attempt %d: utility %s after %d edits", attempt, utility, len(stack))
            while stack:
                self.modifier.undo(stack.pop(), obj)
        for change in best:
            self.modifier.redo(change, obj)
        logger.debug(
            "Search done: tries=%d depth=%d utility %s -> %s (%d edits)",
            self.tries,
            self.depth,
            start_utility,
            best_utility,
            len(best),
        )
        return best

    def undo(self, change: list, obj: T) -> None:
        """Undo every sub-record of ``change`` in reverse order."""
        for sub_change in reversed(change):
            self.modifier.undo(sub_change, obj)

    def redo(self, change: list, obj: T) -> None:
        """Redo every sub-record of ``change`` in forward order."""
        for sub_change in change:
            self.modifier.redo(sub_change, obj)
