"""Logging configuration for the task tracker processes."""

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Install a rich console handler on the root logger.

    Call this once, early, before the first log record is emitted.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
