"""Diagnostic output for the reader.

Write-only: nothing printed here feeds back into control flow.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

PREFIX = "[employee-csv]"


class Diagnostics(Protocol):
    def warning(self, message: str) -> None:
        raise NotImplementedError

    def info(self, message: str) -> None:
        raise NotImplementedError


class ConsoleDiagnostics:
    """Prints warnings to stderr and progress to stdout."""

    def __init__(self, *, out: Optional[TextIO] = None, err: Optional[TextIO] = None, prefix: str = PREFIX):
        self._out = out
        self._err = err
        self._prefix = prefix

    def warning(self, message: str) -> None:
        print(self._prefix, message, file=self._err or sys.stderr)

    def info(self, message: str) -> None:
        print(self._prefix, message, file=self._out or sys.stdout)
