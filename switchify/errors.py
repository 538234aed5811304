"""Module containing errors classes."""

from typing import Any


class ComparisonError(Exception):
    """Base class for all comparison chain errors."""

    pass


class MissingSubjectError(ComparisonError):
    """Raised when a chain is resolved without a subject."""

    def __init__(self, msg: str | None = None) -> None:
        super().__init__(msg or "Cannot compare against a missing subject")


class InvalidTerminalUsageError(MissingSubjectError):
    """Raised when resolve_with_fallback is called on a chain created
    without a subject.
    """

    def __init__(self) -> None:
        super().__init__(
            "Cannot call resolve_with_fallback on a Comparison without a subject. "
            "Use set_default() and resolve_against() instead."
        )


class MissingFallbackError(ComparisonError):
    """Raised when a chain is resolved before a fallback was set."""

    def __init__(self) -> None:
        super().__init__("No tests matched and no default result was set")


class AsyncComparisonError(ComparisonError):
    """Raised when the synchronous resolver meets an awaitable."""

    def __init__(self, stage: str, value: Any) -> None:
        self.stage = stage
        self.value = value
        super().__init__(
            f"The {stage} produced an awaitable {value!r}. "
            "Call with_async() on the Comparison to resolve awaitables."
        )
