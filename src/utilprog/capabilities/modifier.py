"""Modifier (edit) capability.

Modifiers mutate an object in place and return a change record. The record
must be enough to reverse the edit (``undo``) and to replay it (``redo``).
``modify`` may be non-deterministic; ``undo`` and ``redo`` must not be.

To add a new modifier:
1. Subclass Modifier
2. Implement modify() returning a change record describing the edit
3. Implement undo() and redo() from that record alone
"""

import random
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")
C = TypeVar("C")


class Modifier(ABC, Generic[T, C]):
    """Base class for objects that modify other objects reversibly.

    ``C`` is the type of change record this modifier produces. Change
    records are treated as immutable once returned.
    """

    @abstractmethod
    def modify(self, obj: T) -> C:
        """Modify an object in place and return the change.

        Args:
            obj: Object to mutate.

        Returns:
            Change record describing the edit.
        """

    @abstractmethod
    def undo(self, change: C, obj: T) -> None:
        """Reverse exactly the edit described by ``change``.

        Args:
            change: Record returned by an earlier ``modify`` call.
            obj: Object in the state right after that edit.
        """

    @abstractmethod
    def redo(self, change: C, obj: T) -> None:
        """Reapply exactly the edit described by ``change``.

        Args:
            change: Record returned by an earlier ``modify`` call.
            obj: Object in the state right before that edit.
        """


class IndexedChange(NamedTuple):
    """Change record of a ``ModifierChoice``.

    Attributes:
        index: Position of the member modifier that made the change.
        change: The member's own change record.
    """

    index: int
    change: Any


class ModifierChoice(Modifier[T, IndexedChange]):
    """Picks one member uniformly at random to modify the object.

    Undo and redo are routed back to the member that produced the change,
    since a member cannot interpret another member's records.

    Attributes:
        members: Candidate modifiers. Never empty.
        rng: Random source used for member selection.

    Raises:
        ValueError: If ``members`` is empty.
    """

    def __init__(self, members: Iterable[Modifier[T, Any]], rng: random.Random) -> None:
        self.members: list[Modifier[T, Any]] = list(members)
        if not self.members:
            raise ValueError("ModifierChoice requires at least one member modifier")
        self.rng = rng

    def modify(self, obj: T) -> IndexedChange:
        index = self.rng.randrange(len(self.members))
        return IndexedChange(index, self.members[index].modify(obj))

    def undo(self, change: IndexedChange, obj: T) -> None:
        self.members[change.index].undo(change.change, obj)

    def redo(self, change: IndexedChange, obj: T) -> None:
        self.members[change.index].redo(change.change, obj)
