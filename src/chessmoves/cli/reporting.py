"""Error and result rendering for the terminal."""

from __future__ import annotations

import sys
from typing import TextIO


def format_error(error: BaseException | str | None, context: str | None = None) -> str:
    """``"[context] Error: message"``; the prefix is dropped without a context."""
    prefix = f"[{context}] " if context else ""
    if isinstance(error, (BaseException, str)):
        return f"{prefix}Error: {error}"
    return f"{prefix}Error: An unexpected error occurred"


def report_error(
    error: BaseException | str | None,
    context: str | None = None,
    stream: TextIO | None = None,
) -> None:
    print(format_error(error, context), file=stream or sys.stderr)


def report_result(text: str, stream: TextIO | None = None) -> None:
    print(text, file=stream or sys.stdout)
