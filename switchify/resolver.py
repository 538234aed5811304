"""Implementation of Resolver and AsyncResolver to resolve comparison chains."""

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from switchify._helper import (
    MISSING,
    discard_awaitable,
    maybe_await,
    resolve_subject,
    to_callable,
)
from switchify.errors import (
    AsyncComparisonError,
    MissingFallbackError,
    MissingSubjectError,
)
from switchify.settings import ComparisonSettings

if TYPE_CHECKING:
    from switchify.comparison import ComparisonTest

__all__ = [
    "AsyncResolver",
    "Resolver",
    "ResolutionStrategy",
]

logger = logging.getLogger(__name__)

InputType = TypeVar("InputType")
ResultType = TypeVar("ResultType")


class ResolutionStrategy(Protocol):
    """Protocol for the algorithms resolving a comparison chain."""

    is_async: bool

    def resolve(
        self,
        subject: Any,
        tests: Sequence["ComparisonTest"],
        fallback: Any,
    ) -> Any:
        raise NotImplementedError()


def _verify(subject: Any, fallback: Any) -> Callable[[Any], Any]:
    if subject is MISSING:
        raise MissingSubjectError()
    if fallback is MISSING:
        raise MissingFallbackError()
    return to_callable(fallback)


class Resolver(Generic[InputType, ResultType]):
    """Resolve comparison chains synchronously. Does not support awaitables."""

    is_async = False

    def __init__(self, settings: ComparisonSettings) -> None:
        self._trace = settings.trace_resolution

    def resolve(
        self,
        subject: Any,
        tests: Sequence["ComparisonTest[InputType, ResultType]"],
        fallback: Any,
    ) -> ResultType:
        """Evaluate tests in order and return the first matching result.

        Args:
            subject (Any): The subject, or a zero argument callable producing it.
            tests (Sequence[ComparisonTest]): The registered tests.
            fallback (Any): The fallback value or callable.

        Raises:
            MissingSubjectError: If the subject is unset.
            MissingFallbackError: If the fallback is unset.
            AsyncComparisonError: If the subject or a test produces an awaitable.

        Returns:
            ResultType: The matched result or the fallback.
        """
        get_fallback = _verify(subject, fallback)
        value = resolve_subject(subject)
        if inspect.isawaitable(value):
            discard_awaitable(value)
            raise AsyncComparisonError("subject", value)
        if self._trace:
            logger.debug("Resolving comparison against %r", value)

        for index, test in enumerate(tests):
            passed = test.passes(value)
            if inspect.isawaitable(passed):
                discard_awaitable(passed)
                raise AsyncComparisonError(f"test #{index}", passed)
            if passed:
                if self._trace:
                    logger.debug("Test #%d matched %r", index, value)
                return test.result(value)

        if self._trace:
            logger.debug("No test matched %r, using fallback", value)
        return get_fallback(value)


class AsyncResolver(Generic[InputType, ResultType]):
    """Resolve comparison chains, awaiting every step that is awaitable.

    Tests are awaited one at a time in registration order so that no test
    after the first match is evaluated.
    """

    is_async = True

    def __init__(self, settings: ComparisonSettings) -> None:
        self._trace = settings.trace_resolution

    async def resolve(
        self,
        subject: Any,
        tests: Sequence["ComparisonTest[InputType, ResultType]"],
        fallback: Any,
    ) -> ResultType:
        """Evaluate tests in order and return the first matching result.

        Args:
            subject (Any): The subject, a zero argument callable or an awaitable.
            tests (Sequence[ComparisonTest]): The registered tests.
            fallback (Any): The fallback value or callable.

        Raises:
            MissingSubjectError: If the subject is unset.
            MissingFallbackError: If the fallback is unset.

        Returns:
            ResultType: The matched result or the fallback.
        """
        get_fallback = _verify(subject, fallback)
        value = await maybe_await(resolve_subject(subject))
        if self._trace:
            logger.debug("Resolving comparison against %r", value)

        for index, test in enumerate(tests):
            if await maybe_await(test.passes(value)):
                if self._trace:
                    logger.debug("Test #%d matched %r", index, value)
                return await maybe_await(test.result(value))

        if self._trace:
            logger.debug("No test matched %r, using fallback", value)
        return await maybe_await(get_fallback(value))
