"""Utility (scoring) capability.

A utility assigns a real-valued score to an object. Higher is better.
Utilities must be pure: evaluating the same object twice yields the same
score and never mutates the object.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class Utility(ABC, Generic[T]):
    """Base class for objects that measure the utility of another object."""

    @abstractmethod
    def utility(self, obj: T) -> float:
        """Compute the utility of an object.

        Args:
            obj: Object to measure. Must not be mutated.

        Returns:
            Utility score. Non-finite values are passed through unchecked.
        """


class UtilitySum(Utility[T]):
    """Sums the utility of every member.

    An empty sum has utility ``0.0``.

    Attributes:
        members: Sub-utilities whose scores are added together.
    """

    def __init__(self, members: Iterable[Utility[T]]) -> None:
        self.members: list[Utility[T]] = list(members)

    def utility(self, obj: T) -> float:
        """Return the sum of all member utilities for ``obj``."""
        return sum((member.utility(obj) for member in self.members), 0.0)


class FunctionUtility(Utility[T]):
    """Adapts a plain ``obj -> float`` callable to the ``Utility`` interface.

    Attributes:
        func: Scoring callable.
    """

    def __init__(self, func: Callable[[T], float]) -> None:
        self.func = func

    def utility(self, obj: T) -> float:
        return float(self.func(obj))
