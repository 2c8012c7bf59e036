"""Capabilities consumed by the optimizer.

Every capability is an abstract base class generic over the object type:

- ``Utility``: scores an object (``UtilitySum`` adds member scores).
- ``Generator``: produces an object (``GeneratorChoice`` picks a random member).
- ``Modifier``: edits an object reversibly (``ModifierChoice`` picks a random
  member and records its index in an ``IndexedChange``).
"""

from utilprog.capabilities.generator import Generator, GeneratorChoice
from utilprog.capabilities.modifier import IndexedChange, Modifier, ModifierChoice
from utilprog.capabilities.utility import FunctionUtility, Utility, UtilitySum

__all__ = [
    "Utility",
    "UtilitySum",
    "FunctionUtility",
    "Generator",
    "GeneratorChoice",
    "Modifier",
    "ModifierChoice",
    "IndexedChange",
]
