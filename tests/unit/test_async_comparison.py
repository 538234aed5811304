import asyncio

import pytest

from switchify import when, when_something
from switchify.errors import (
    InvalidTerminalUsageError,
    MissingFallbackError,
    MissingSubjectError,
)
from tests.utils import AsyncExecutionCounter, later, resolves_to


@pytest.mark.asyncio_cooperative
async def test_async_equals():
    result = (
        when_something()
        .with_async()
        .equals(resolves_to("a"), True)
        .set_default(False)
        .resolve_against(later("a"))
    )
    assert asyncio.iscoroutine(result)
    assert await result is True


@pytest.mark.asyncio_cooperative
async def test_async_resolve_with_fallback():
    result = await (
        when("b")
        .with_async()
        .equals(resolves_to("a"), resolves_to("A"))
        .equals_loosely(resolves_to("b"), resolves_to("B"))
        .resolve_with_fallback(resolves_to("-"))
    )
    assert result == "B"


@pytest.mark.asyncio_cooperative
async def test_async_fallback():
    result = await (
        when(1)
        .with_async()
        .equals(resolves_to("1"), "strict")
        .not_equals_loosely(resolves_to("1"), "loose")
        .resolve_with_fallback(resolves_to("fallback"))
    )
    assert result == "fallback"


@pytest.mark.asyncio_cooperative
async def test_async_mixed_with_sync_values():
    chain = (
        when_something()
        .with_async()
        .equals("a", "A")
        .when_condition(resolves_to(True), lambda value: f"B {value}")
        .set_default("-")
    )
    assert await chain.resolve_against("a") == "A"
    assert await chain.resolve_against("z") == "B z"


@pytest.mark.asyncio_cooperative
async def test_async_when_false():
    chain = (
        when_something()
        .with_async()
        .when_false(resolves_to(True), "true")
        .when_false(resolves_to(False), "false")
        .set_default("-")
    )
    assert await chain.resolve_against(None) == "false"


@pytest.mark.asyncio_cooperative
async def test_async_ordering_and_short_circuit():
    counter = AsyncExecutionCounter()

    async def compare_a(value):
        return "a"

    async def compare_b(value):
        return "b"

    async def result_a(value):
        return "A"

    async def result_b(value):
        return "B"

    async def fallback(value):
        return "-"

    chain = (
        when_something()
        .with_async()
        .equals(counter(compare_b, "compare_b"), counter(result_b, "result_b"))
        .equals(counter(compare_a, "compare_a"), counter(result_a, "result_a"))
        .equals_loosely(counter(compare_a, "again"), counter(result_a, "again"))
        .set_default(counter(fallback, "fallback"))
    )

    assert await chain.resolve_against("a") == "A"
    assert counter.calls == ["compare_b", "compare_a", "result_a"]


@pytest.mark.asyncio_cooperative
async def test_async_parity_with_sync():
    def build(chain):
        return (
            chain.equals("1", "strict")
            .equals_loosely("1", "loose")
            .not_equals(2, "not two")
            .set_default("-")
        )

    sync_chain = build(when_something())
    async_chain = build(when_something().with_async())
    for subject in (1, "1", 2, 3):
        assert await async_chain.resolve_against(subject) == (
            sync_chain.resolve_against(subject)
        )


@pytest.mark.asyncio_cooperative
async def test_async_subject_function():
    async def fetch():
        return "a"

    chain = when(fetch).with_async().equals("a", "A")
    assert await chain.resolve_with_fallback("-") == "A"


@pytest.mark.asyncio_cooperative
async def test_async_errors_surface_when_awaited():
    chain = when_something().with_async().equals("a", "A")
    pending = chain.resolve_against("a")
    with pytest.raises(MissingFallbackError):
        await pending

    pending = when_something().with_async().set_default("-").resolve_against()
    with pytest.raises(MissingSubjectError):
        await pending



@pytest.mark.asyncio_cooperative
async def test_async_resolve_with_fallback_without_subject():
    counter = AsyncExecutionCounter()

    async def compare_a(value):
        return "a"

    chain = when_something().with_async().equals(counter(compare_a), "A")
    with pytest.raises(InvalidTerminalUsageError):
        chain.resolve_with_fallback("-")
    assert counter.execution == 0


@pytest.mark.asyncio_cooperative
async def test_async_bound_awaitable_subject_is_reusable():
    counter = AsyncExecutionCounter()

    async def fetch():
        return "a"

    chain = when(counter(fetch)()).with_async().equals("a", "A")
    assert await chain.resolve_with_fallback("-") == "A"
    assert await chain.resolve_against() == "A"
    assert await chain.resolve_against("b") == "-"
    assert counter.execution == 1
