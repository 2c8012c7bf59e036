"""Logging utilities for utilprog.

Provides a multiline-aligned formatter and logging configuration helper.
"""

import logging

__all__ = ["setup_logging", "MultilineFormatter"]


class MultilineFormatter(logging.Formatter):
    """Formatter that aligns multiline messages with indentation.

    Attributes:
        msg_width: Width the first message line is padded to before metadata.
        show_metadata: Whether to append timestamp/level/name metadata.
    """

    def __init__(self, msg_width: int, show_metadata: bool = True) -> None:
        """Initialize the formatter.

        Args:
            msg_width: Width for message alignment.
            show_metadata: Whether to append timestamp/level/name metadata.
        """
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.msg_width = msg_width
        self.show_metadata = show_metadata

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with multiline alignment.

        Args:
            record: The log record to format.

        Returns:
            Formatted log message string.
        """
        lines = record.getMessage().split("\n")

        first_line = lines[0]
        if self.show_metadata:
            metadata = f"{self.formatTime(record)} - {record.levelname} - {record.name}"
            first_line = f"{lines[0]:<{self.msg_width}}{metadata}"

        if len(lines) == 1:
            return first_line
        continuation = "\n".join(lines[1:])
        return f"{first_line}\n{continuation}"


def setup_logging(
    log_file: str | None = None, level: int = logging.INFO, msg_width: int = 100, show_metadata: bool = True
) -> logging.Handler:
    """Configure root logging with the multiline-aligned formatter.

    Args:
        log_file: Path to the log file. Logs go to stderr when ``None``.
        level: Logging level.
        msg_width: Width for message alignment.
        show_metadata: Whether to append timestamp/level/name metadata to log lines.

    Returns:
        The handler attached to the root logger.
    """
    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(log_file, mode="w")
    handler.setFormatter(MultilineFormatter(msg_width=msg_width, show_metadata=show_metadata))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)
    return handler
