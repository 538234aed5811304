"""Switchify, fluent comparison chains in place of if/elif ladders."""

__version__ = "0.1.0"


from .comparison import Comparison, ComparisonTest
from .errors import (
    AsyncComparisonError,
    ComparisonError,
    InvalidTerminalUsageError,
    MissingFallbackError,
    MissingSubjectError,
)
from .settings import ComparisonSettings, get_settings
from .types import Comparable


def when(
    subject: Comparable = True,
    *,
    settings: ComparisonSettings | None = None,
) -> Comparison:
    """Create a comparison chain bound to a subject.

    Without a subject, the chain compares against True, which turns it into
    a chain of boolean conditions.
    """
    return Comparison.when(subject, settings=settings)


def when_something(*, settings: ComparisonSettings | None = None) -> Comparison:
    """Create a reusable comparison chain resolved later with resolve_against()."""
    return Comparison.when_something(settings=settings)


__all__ = [
    "Comparison",
    "ComparisonTest",
    "ComparisonSettings",
    "get_settings",
    "when",
    "when_something",
    "ComparisonError",
    "MissingSubjectError",
    "MissingFallbackError",
    "InvalidTerminalUsageError",
    "AsyncComparisonError",
]
