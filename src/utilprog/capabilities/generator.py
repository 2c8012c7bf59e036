"""Generator capability.

Generators produce fresh candidate objects. Generation happens before any
edit, so there is nothing to undo.
"""

import random
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class Generator(ABC, Generic[T]):
    """Base class for objects that generate other objects."""

    @abstractmethod
    def generate(self) -> T:
        """Generate a new object.

        This might be non-deterministic.

        Returns:
            The generated object.
        """


class GeneratorChoice(Generator[T]):
    """Picks one member uniformly at random and generates with it.

    Attributes:
        members: Candidate generators. Never empty.
        rng: Random source used for member selection.

    Raises:
        ValueError: If ``members`` is empty.
    """

    def __init__(self, members: Iterable[Generator[T]], rng: random.Random) -> None:
        self.members: list[Generator[T]] = list(members)
        if not self.members:
            raise ValueError("GeneratorChoice requires at least one member generator")
        self.rng = rng

    def generate(self) -> T:
        index = self.rng.randrange(len(self.members))
        return self.members[index].generate()
