"""Shared test utilities and fixtures for pytest."""

import logging
import random
from collections.abc import Iterator
from typing import Any

import pytest

from utilprog.capabilities import Modifier, Utility


class SwapModifier(Modifier[list, tuple[int, int]]):
    """Swaps two random positions of a list.

    The change record is the pair of swapped positions; swapping again is
    both the undo and the redo.
    """

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def modify(self, obj: list) -> tuple[int, int]:
        i = self.rng.randrange(len(obj))
        j = self.rng.randrange(len(obj))
        obj[i], obj[j] = obj[j], obj[i]
        return (i, j)

    def undo(self, change: tuple[int, int], obj: list) -> None:
        i, j = change
        obj[i], obj[j] = obj[j], obj[i]

    def redo(self, change: tuple[int, int], obj: list) -> None:
        self.undo(change, obj)


class SortednessUtility(Utility[list]):
    """Counts adjacent pairs that are in ascending order."""

    def utility(self, obj: list) -> float:
        return float(sum(1 for a, b in zip(obj, obj[1:]) if a <= b))


class ConstantUtility(Utility[Any]):
    """Always returns the same score and counts evaluations.

    Attributes:
        value: Score returned for every object.
        calls: Number of evaluations so far.
    """

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def utility(self, obj: Any) -> float:
        self.calls += 1
        return self.value


class RecordingModifier(Modifier[list, str]):
    """Appends its tag to a list and records every call it receives.

    Attributes:
        tag: Value appended by ``modify``.
        calls: ``(method, change)`` pairs in call order.
    """

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.calls: list[tuple[str, str]] = []

    def modify(self, obj: list) -> str:
        obj.append(self.tag)
        self.calls.append(("modify", self.tag))
        return self.tag

    def undo(self, change: str, obj: list) -> None:
        assert obj[-1] == change
        obj.pop()
        self.calls.append(("undo", change))

    def redo(self, change: str, obj: list) -> None:
        obj.append(change)
        self.calls.append(("redo", change))


@pytest.fixture
def rng() -> random.Random:
    """Fixture providing a deterministically seeded random source."""
    return random.Random(1234)


@pytest.fixture
def shuffled() -> list[int]:
    """Fixture providing a deterministic permutation of 0..11."""
    values = list(range(12))
    random.Random(7).shuffle(values)
    return values


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Remove handlers and restore the root level after a logging test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler not in handlers:
            logging.root.removeHandler(handler)
            handler.close()
    logging.root.setLevel(level)
