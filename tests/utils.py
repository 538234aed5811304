import asyncio
from typing import Any


def true_func() -> bool:
    return True


def false_func() -> bool:
    return False


async def later(value: Any) -> Any:
    await asyncio.sleep(0)
    return value


def resolves_to(value: Any):
    """Create a one argument async function ignoring its argument."""

    async def wrapper(_value: Any) -> Any:
        return await later(value)

    return wrapper


class ExecutionCounter:
    def __init__(self) -> None:
        self.execution = 0
        self.calls: list[str] = []

    def __call__(self, f, name: str | None = None):
        def wrapper(*args, **kwargs):
            self.execution += 1
            self.calls.append(name or f.__name__)
            return f(*args, **kwargs)

        return wrapper


class AsyncExecutionCounter(ExecutionCounter):
    def __call__(self, f, name: str | None = None):
        async def wrapper(*args, **kwargs):
            self.execution += 1
            self.calls.append(name or f.__name__)
            return await f(*args, **kwargs)

        return wrapper
