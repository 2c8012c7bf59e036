"""Utility modules for utilprog.

Provides logging configuration.
"""

from utilprog.utils.logging import MultilineFormatter, setup_logging

__all__ = ["setup_logging", "MultilineFormatter"]
