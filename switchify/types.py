from collections.abc import Awaitable, Callable
from typing import TypeAlias, TypeVar, Union

InputType = TypeVar("InputType")
ResultType = TypeVar("ResultType")
ComparisonType = TypeVar("ComparisonType")

# Callables come first so that the aliases are subscripted as
# [InputType, OutputType].
ComparisonResult: TypeAlias = Union[
    Callable[[InputType], ResultType],
    Callable[[InputType], Awaitable[ResultType]],
    ResultType,
]
ComparisonValue: TypeAlias = Union[
    Callable[[InputType], ComparisonType],
    Callable[[InputType], Awaitable[ComparisonType]],
    ComparisonType,
]
Comparable: TypeAlias = Union[
    Callable[[], InputType], Awaitable[InputType], InputType
]

Predicate: TypeAlias = Callable[[InputType], bool | Awaitable[bool]]
ResultFactory: TypeAlias = Callable[
    [InputType], Union[ResultType, Awaitable[ResultType]]
]
