"""Number example: steer an 8-bit number toward a target and toward primes.

Utility programming is about balancing features rather than writing rules.
Rewarding primes makes a prime result more likely, but only as far as it
does not conflict with the pull toward the target value.

Run with: python -m utilprog.examples.number --seed 0
"""

import argparse
import logging
import math
import random
import sys
from dataclasses import dataclass
from pathlib import Path

from utilprog.capabilities import Generator, GeneratorChoice, Modifier, ModifierChoice, Utility, UtilitySum
from utilprog.search import ModifyOptimizer, OptimizationReport, optimize_to_fixed_point
from utilprog.utils import setup_logging

logger = logging.getLogger(__name__)

U8_MAX = 255


@dataclass
class Number:
    """Mutable holder for an 8-bit unsigned number.

    Attributes:
        value: Current value in ``[0, 255]``.
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)


def is_prime(value: int) -> bool:
    """Return True if ``value`` is a prime number."""
    if value < 2:
        return False
    return all(value % i for i in range(2, math.isqrt(value) + 1))


class TargetUtility(Utility[Number]):
    """Scores the distance to a target value.

    Attributes:
        value: Target value.
        penalty: Utility per unit of distance. Usually negative.
    """

    def __init__(self, value: int, penalty: float) -> None:
        self.value = value
        self.penalty = penalty

    def utility(self, obj: Number) -> float:
        return abs(obj.value - self.value) * self.penalty


class PrimeUtility(Utility[Number]):
    """Gives a flat reward when the number is prime.

    Attributes:
        reward: Utility of a prime number. Usually positive.
    """

    def __init__(self, reward: float) -> None:
        self.reward = reward

    def utility(self, obj: Number) -> float:
        return self.reward if is_prime(obj.value) else 0.0


class RandomNumberGenerator(Generator[Number]):
    """Generates a uniformly random 8-bit number."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def generate(self) -> Number:
        return Number(self.rng.randint(0, U8_MAX))


class FixedNumberGenerator(Generator[Number]):
    """Always starts at the same value."""

    def __init__(self, value: int) -> None:
        self.value = value

    def generate(self) -> Number:
        return Number(self.value)


@dataclass(frozen=True)
class NumberChange:
    """A number change, used to undo and redo modifications.

    Attributes:
        old: Value before the edit.
        new: Value after the edit.
    """

    old: int
    new: int


class _NumberModifier(Modifier[Number, NumberChange]):
    """Shared undo/redo for modifiers that record old and new values."""

    def _step(self, value: int) -> int:
        raise NotImplementedError

    def modify(self, obj: Number) -> NumberChange:
        change = NumberChange(old=obj.value, new=self._step(obj.value))
        obj.value = change.new
        return change

    def undo(self, change: NumberChange, obj: Number) -> None:
        obj.value = change.old

    def redo(self, change: NumberChange, obj: Number) -> None:
        obj.value = change.new


class IncrementModifier(_NumberModifier):
    """Increments the number, saturating at 255."""

    def _step(self, value: int) -> int:
        return value + 1 if value < U8_MAX else value


class DecrementModifier(_NumberModifier):
    """Decrements the number, saturating at 0."""

    def _step(self, value: int) -> int:
        return value - 1 if value > 0 else value


def build_generator(start: str, start_value: int, rng: random.Random) -> Generator[Number]:
    """Build the starting-number generator selected on the command line.

    Args:
        start: ``random``, ``fixed`` or ``choice`` (random pick of random, 100 and 0).
        start_value: Value used by ``fixed``.
        rng: Random source.

    Returns:
        Generator for the initial number.
    """
    if start == "random":
        return RandomNumberGenerator(rng)
    if start == "fixed":
        return FixedNumberGenerator(start_value)
    return GeneratorChoice([RandomNumberGenerator(rng), FixedNumberGenerator(100), FixedNumberGenerator(0)], rng)


def build_optimizer(
    target: int, penalty: float, reward: float, tries: int, depth: int, rng: random.Random, progress: bool = False
) -> ModifyOptimizer[Number]:
    """Build the number optimizer: target distance plus prime reward, +/-1 edits."""
    return ModifyOptimizer(
        modifier=ModifierChoice([IncrementModifier(), DecrementModifier()], rng),
        utility=UtilitySum([TargetUtility(target, penalty), PrimeUtility(reward)]),
        tries=tries,
        depth=depth,
        progress=progress,
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Optimize a number toward a target value and toward primes")
    parser.add_argument(
        "--start", choices=["random", "fixed", "choice"], default="fixed", help="Starting number generator"
    )
    parser.add_argument("--start-value", type=int, default=0, help="Starting value for --start fixed")
    parser.add_argument("--target", type=int, default=42, help="Target value")
    parser.add_argument("--penalty", type=float, default=-1.0, help="Utility per unit of distance to the target")
    parser.add_argument("--reward", type=float, default=5.0, help="Utility of a prime number")
    parser.add_argument("--tries", type=int, default=1000, help="Restart attempts per round")
    parser.add_argument("--depth", type=int, default=20, help="Edits per attempt")
    parser.add_argument("--seed", type=int, default=-1, help="Random seed (negative for unseeded)")
    parser.add_argument("--max-rounds", type=int, default=None, help="Stop after this many rounds")
    parser.add_argument("--log-file", type=str, default=None, help="Write logs to this file")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--report", type=Path, default=None, help="Write a JSON report to this path")
    parser.add_argument("--plot", type=Path, default=None, help="Save a utility trajectory plot to this path")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar per round")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate a number and optimize it until it reaches a fixed point.

    Prints ``<number>, utility <score>`` for the start and every round that
    changed the number.

    Args:
        argv: Command-line arguments. Defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    args = _parse_args(argv)
    if args.log_file is not None:
        setup_logging(args.log_file, level=getattr(logging, args.log_level.upper()))
    rng = random.Random() if args.seed < 0 else random.Random(args.seed)

    num = build_generator(args.start, args.start_value, rng).generate()
    print(f"Starting at: {num}")
    optimizer = build_optimizer(args.target, args.penalty, args.reward, args.tries, args.depth, rng, args.progress)
    report = OptimizationReport(args.report) if args.report is not None else None
    rounds = optimize_to_fixed_point(optimizer, num, max_rounds=args.max_rounds, report=report)
    for r in rounds:
        print(f"{r.obj}, utility {r.utility}")

    if report is not None:
        print(report.table())
    if args.plot is not None:
        from utilprog.search.visualize import plot_trajectory

        plot_trajectory(rounds, args.plot, title=f"Number optimization toward {args.target}")
        logger.info("Plot saved to %s", args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
