"""Exceptions raised by markdownout.

Failures of the underlying sink (``OSError`` and friends) are never wrapped;
they reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Sequence


class MarkdownOutError(Exception):
    """Base class for all markdownout errors."""


class InvalidOptionError(MarkdownOutError, ValueError):
    """A style or format value outside its closed set was supplied."""

    def __init__(self, kind: str, option: Any, choices: Sequence[str]) -> None:
        self.kind = kind
        self.option = option
        self.choices = list(choices)
        super().__init__(
            f"Unknown {kind} {option!r}. Choose from: {', '.join(self.choices)}"
        )


class ResourceReleasedError(MarkdownOutError, RuntimeError):
    """An emit operation was called on a writer whose sink is closed."""
