"""The fluent comparison chain.

Example:
    from switchify import when, when_something

    result = (
        when(value)
        .equals("a", lambda value: "Value is a")
        .equals("2", 'Value is the string "2"')
        .equals(2, "Value is the number 2")
        .equals_loosely("1", 'Value is loosely the string "1"')
        .when_true(count == 2, "Count is exactly 2")
        .resolve_with_fallback("Value is something else")
    )

    # Or build the chain once and resolve it later, many times:
    describe = (
        when_something()
        .equals("a", "Value is a")
        .not_equals(1, "Value is not 1")
        .set_default(lambda value: f"Value is {value}")
    )
    describe.resolve_against("a")
    #> 'Value is a'

"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from switchify._helper import (
    MISSING,
    PendingCheck,
    SharedAwaitable,
    to_callable,
)
from switchify.equality import compare
from switchify.errors import InvalidTerminalUsageError
from switchify.resolver import AsyncResolver, ResolutionStrategy, Resolver
from switchify.settings import ComparisonSettings, get_settings
from switchify.types import (
    Comparable,
    ComparisonResult,
    ComparisonValue,
    Predicate,
    ResultFactory,
)

__all__ = ("Comparison", "ComparisonTest")

InputType = TypeVar("InputType")
ResultType = TypeVar("ResultType")
ComparisonType = TypeVar("ComparisonType")


@dataclass(frozen=True)
class ComparisonTest(Generic[InputType, ResultType]):
    """A single registered test of a comparison chain."""

    passes: Predicate[InputType]
    result: ResultFactory[InputType, ResultType]


class Comparison(Generic[InputType, ResultType]):
    """A fluent replacement for if/elif ladders and match statements.

    Tests are evaluated in registration order against a single subject and
    the first one that passes provides the result. Calling
    resolve_with_fallback() starts the evaluation of a chain bound to a
    subject; chains built with when_something() are completed with
    set_default() and evaluated with resolve_against().
    """

    _tests: list[ComparisonTest[InputType, ResultType]]
    _resolver: ResolutionStrategy

    @classmethod
    def when(
        cls,
        subject: Comparable[InputType] = True,
        *,
        settings: ComparisonSettings | None = None,
    ) -> "Comparison[InputType, ResultType]":
        """Create a chain bound to a subject.

        Args:
            subject (Comparable[InputType], optional): The value to compare.
                Defaults to True, for chains of boolean conditions.
            settings (ComparisonSettings | None, optional): Settings override.

        Returns:
            Comparison[InputType, ResultType]: A new chain.
        """
        return cls(subject, settings=settings)

    @classmethod
    def when_something(
        cls, *, settings: ComparisonSettings | None = None
    ) -> "Comparison[InputType, ResultType]":
        """Create a chain without a subject, to be resolved later.

        Args:
            settings (ComparisonSettings | None, optional): Settings override.

        Returns:
            Comparison[InputType, ResultType]: A new reusable chain.
        """
        return cls(settings=settings)

    def __init__(
        self,
        subject: Comparable[InputType] = MISSING,
        *,
        settings: ComparisonSettings | None = None,
    ) -> None:
        if settings is None:
            settings = get_settings()
        self._settings = settings
        if inspect.isawaitable(subject):
            subject = SharedAwaitable(subject)
        self._subject = subject
        self._fallback: Any = MISSING
        self._tests = []
        self._resolver = Resolver(self._settings)

    def __repr__(self) -> str:
        mode = "async" if self.is_async else "sync"
        return (
            f"{type(self).__name__}(subject={self._subject!r}, "
            f"tests={len(self._tests)}, mode={mode})"
        )

    @property
    def is_async(self) -> bool:
        return self._resolver.is_async

    @property
    def tests(self) -> tuple[ComparisonTest[InputType, ResultType], ...]:
        return tuple(self._tests)

    def with_async(self) -> "Comparison[InputType, ResultType]":
        """Resolve this chain asynchronously.

        Resolution then returns a coroutine, and the subject, each test,
        the matched result and the fallback are awaited when awaitable.
        """
        self._resolver = AsyncResolver(self._settings)
        return self

    def equals(
        self,
        comparison: ComparisonValue[InputType, ComparisonType],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        """Add a test passing when the comparison strictly equals the subject."""
        return self._compare(comparison, result, strict=True, negate=False)

    def equals_loosely(
        self,
        comparison: ComparisonValue[InputType, ComparisonType],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        """Add a test passing when the comparison loosely equals the subject."""
        return self._compare(comparison, result, strict=False, negate=False)

    def not_equals(
        self,
        comparison: ComparisonValue[InputType, ComparisonType],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        """Add a test passing when the comparison is not strictly equal."""
        return self._compare(comparison, result, strict=True, negate=True)

    def not_equals_loosely(
        self,
        comparison: ComparisonValue[InputType, ComparisonType],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        """Add a test passing when the comparison is not loosely equal."""
        return self._compare(comparison, result, strict=False, negate=True)

    def when_condition(
        self,
        condition: ComparisonValue[InputType, bool],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        """Add a test passing when the condition resolves to True.

        Args:
            condition (ComparisonValue[InputType, bool]): A boolean or a
                function of the subject returning a boolean.
            result (ComparisonResult[InputType, ResultType]): The result to
                return if the test passes.

        Returns:
            Comparison[InputType, ResultType]: This chain.
        """
        return self._condition(condition, result, expected=True)

    def when_true(
        self,
        condition: ComparisonValue[InputType, bool],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        return self._condition(condition, result, expected=True)

    def when_false(
        self,
        condition: ComparisonValue[InputType, bool],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        """Add a test passing when the condition resolves to False."""
        return self._condition(condition, result, expected=False)

    def set_default(
        self, result: ComparisonResult[InputType, ResultType]
    ) -> "Comparison[InputType, ResultType]":
        """Set the result used when no test passes. The last call wins.

        Args:
            result (ComparisonResult[InputType, ResultType]): The fallback.

        Returns:
            Comparison[InputType, ResultType]: This chain.
        """
        self._fallback = result
        return self

    def resolve_with_fallback(
        self, result: ComparisonResult[InputType, ResultType]
    ) -> Any:
        """Set the fallback and resolve the chain against its subject.

        Args:
            result (ComparisonResult[InputType, ResultType]): The fallback.

        Raises:
            InvalidTerminalUsageError: If the chain has no subject.

        Returns:
            ResultType: The resolved result, or a coroutine resolving to it
            on async chains.
        """
        if self._subject is MISSING:
            raise InvalidTerminalUsageError()
        self._fallback = result
        return self.resolve_against(self._subject)

    def resolve_against(self, subject: Comparable[InputType] = MISSING) -> Any:
        """Resolve the chain against a subject.

        The chain is not modified, so it can be resolved again against
        other subjects.

        Args:
            subject (Comparable[InputType], optional): The value to compare.
                Defaults to the subject the chain was created with.

        Raises:
            MissingSubjectError: If no subject is available.
            MissingFallbackError: If no fallback was set.

        Returns:
            ResultType: The resolved result, or a coroutine resolving to it
            on async chains.
        """
        if subject is MISSING:
            subject = self._subject
        return self._resolver.resolve(
            subject, tuple(self._tests), self._fallback
        )

    # Aliases.
    is_ = equals
    is_like = equals_loosely
    is_not = not_equals
    is_not_like = not_equals_loosely
    else_when = when_condition
    default_to = set_default
    otherwise = resolve_with_fallback
    against = resolve_against
    with_promises = with_async

    def _append(
        self,
        passes: Predicate[InputType],
        result: ComparisonResult[InputType, ResultType],
    ) -> "Comparison[InputType, ResultType]":
        self._tests.append(ComparisonTest(passes, to_callable(result)))
        return self

    def _condition(
        self,
        condition: ComparisonValue[InputType, bool],
        result: ComparisonResult[InputType, ResultType],
        expected: bool,
    ) -> "Comparison[InputType, ResultType]":
        get_condition: Callable[[InputType], Any] = to_callable(condition)

        def passes(value: InputType) -> Any:
            resolved = get_condition(value)
            if inspect.isawaitable(resolved):
                return PendingCheck(
                    resolved, lambda awaited: awaited is expected
                )
            return resolved is expected

        return self._append(passes, result)

    def _compare(
        self,
        comparison: ComparisonValue[InputType, ComparisonType],
        result: ComparisonResult[InputType, ResultType],
        strict: bool,
        negate: bool,
    ) -> "Comparison[InputType, ResultType]":
        get_comparison: Callable[[InputType], Any] = to_callable(comparison)

        def passes(value: InputType) -> Any:
            resolved = get_comparison(value)
            if inspect.isawaitable(resolved):
                return PendingCheck(
                    resolved,
                    lambda awaited: compare(
                        awaited, value, strict=strict, negate=negate
                    ),
                )
            return compare(resolved, value, strict=strict, negate=negate)

        return self._append(passes, result)
