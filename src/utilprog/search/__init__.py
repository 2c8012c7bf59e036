"""Utility-maximizing search for utilprog.

``ModifyOptimizer`` is a multi-restart, depth-bounded hill climber that
backtracks through exact ``undo`` calls. Because it is a ``Modifier`` itself,
its whole outcome can be undone or redone, and optimizers can be nested.
``optimize_to_fixed_point`` drives an optimizer until it stops making
progress, optionally recording an ``OptimizationReport``.
"""

from utilprog.search.fixed_point import RoundRecord, optimize_to_fixed_point
from utilprog.search.optimizer import ModifyOptimizer
from utilprog.search.report import OptimizationReport

__all__ = ["ModifyOptimizer", "optimize_to_fixed_point", "RoundRecord", "OptimizationReport"]
