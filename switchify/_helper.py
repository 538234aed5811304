import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Final, Generic, TypeVar

T = TypeVar("T")
In = TypeVar("In")


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final[Any] = _Missing()


def _takes_argument(function: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


def to_callable(value: T | Callable[..., T]) -> Callable[[In], T]:
    """Normalize a value-or-callable into a one argument callable.

    Callables taking no argument are wrapped to ignore the subject.
    """
    if callable(value):
        if _takes_argument(value):
            return value

        def call(_input: In) -> T:
            return value()

        return call

    def constant(_input: In) -> T:
        return value

    return constant


def resolve_subject(subject: T | Callable[[], T]) -> T:
    if callable(subject):
        return subject()
    return subject


class PendingCheck:
    """An awaitable applying a check to the value of another awaitable."""

    __slots__ = ("_awaitable", "_check")

    def __init__(self, awaitable: Awaitable[Any], check: Callable[[Any], bool]):
        self._awaitable = awaitable
        self._check = check

    def __await__(self):
        return self._resolve().__await__()

    async def _resolve(self) -> bool:
        return self._check(await self._awaitable)

    def close(self) -> None:
        discard_awaitable(self._awaitable)


class SharedAwaitable(Generic[T]):
    """An awaitable that can be awaited any number of times.

    The wrapped awaitable is scheduled as a task on first await and every
    await shares that task.
    """

    __slots__ = ("_awaitable", "_task")

    def __init__(self, awaitable: Awaitable[T]) -> None:
        self._awaitable = awaitable
        self._task: asyncio.Future[T] | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._awaitable!r})"

    def __await__(self):
        if self._task is None:
            self._task = asyncio.ensure_future(self._awaitable)
        return self._task.__await__()


def discard_awaitable(value: Any) -> None:
    # Prevents "coroutine was never awaited" warnings.
    if inspect.iscoroutine(value) or isinstance(value, PendingCheck):
        value.close()


async def maybe_await(value: T | Awaitable[T]) -> T:
    if inspect.isawaitable(value):
        return await value
    return value
