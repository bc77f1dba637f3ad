# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Logging setup for hosts embedding the generator."""

import logging
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Route ``ctorgen`` diagnostics and progress logs through Rich.

    Hosts that embed the generator in a build step usually want generation
    logs on their own error stream instead of the process stdout.

    Args:
        level: Logging severity threshold.
        stream: Stream the Rich console writes to; Rich's default when omitted.
    """
    console = None
    if stream is not None:
        console = Console(file=stream, force_terminal=False)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )
