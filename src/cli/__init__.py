"""Command-line interface for the Nuclino client.

This package provides the `nuclino` CLI tool for browsing and editing a
Nuclino wiki from the terminal, with Rich output and typed exit codes.
"""

from .models import ExitCode
from .output import OutputHandler

__all__ = [
    'ExitCode',
    'OutputHandler',
]
