"""utilprog - composable utility programming.

Instead of programming rules explicitly, aspects of a solution are assigned a
utility, and an optimizer generates and modifies objects to maximize it.
Trading one feature against another is a matter of adjusting utilities.

Subpackages:
    capabilities: Utility, Generator and Modifier interfaces and their list aggregates
    search: ModifyOptimizer, fixed-point driver, JSON report and trajectory plot
    utils: Logging configuration
    examples: Number example and console driver
"""

from utilprog.capabilities import (
    FunctionUtility,
    Generator,
    GeneratorChoice,
    IndexedChange,
    Modifier,
    ModifierChoice,
    Utility,
    UtilitySum,
)
from utilprog.search import ModifyOptimizer, OptimizationReport, RoundRecord, optimize_to_fixed_point

__all__ = [
    "Utility",
    "UtilitySum",
    "FunctionUtility",
    "Generator",
    "GeneratorChoice",
    "Modifier",
    "ModifierChoice",
    "IndexedChange",
    "ModifyOptimizer",
    "optimize_to_fixed_point",
    "RoundRecord",
    "OptimizationReport",
]
