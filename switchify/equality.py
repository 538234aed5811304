"""Strict and loose equality used by the comparison tests.

Strict equality never converts between types: ``0`` is not ``False`` and
``"1"`` is not ``1``. Integers and floats count as one numeric type, so
``1`` strictly equals ``1.0``.

Loose equality compares booleans as the numbers ``0`` and ``1`` and parses
strings compared against numbers as numbers, so ``"1"`` loosely equals
``1``, ``0`` loosely equals ``False`` and ``""`` loosely equals ``0``.
Strings are never read as booleans: ``"true"`` does not loosely equal
``True``. ``None`` only loosely equals ``None``.
"""

import math
from typing import Any

from pydantic import TypeAdapter, ValidationError

__all__ = ("compare", "loose_equals", "strict_equals")

_number_adapter = TypeAdapter(float)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def strict_equals(comparison: Any, subject: Any) -> bool:
    """Compare two values without type conversion.

    Args:
        comparison (Any): The value registered on the test.
        subject (Any): The value under test.

    Returns:
        bool: True if both values are identical or of the same type and equal.
    """
    if comparison is subject:
        return True
    if _is_number(comparison) and _is_number(subject):
        return bool(comparison == subject)
    return type(comparison) is type(subject) and bool(comparison == subject)


def parse_number(text: str) -> float:
    """Read a string as a number, NaN when it is not one.

    Surrounding whitespace is ignored and a blank string reads as 0.
    """
    text = text.strip()
    if not text:
        return 0.0
    # Digit separators are Python syntax, not numbers.
    if "_" in text:
        return math.nan
    try:
        return _number_adapter.validate_python(text)
    except ValidationError:
        return math.nan


def _as_number(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    return value


def loose_equals(comparison: Any, subject: Any) -> bool:
    """Compare two values, converting booleans and numeric strings.

    Args:
        comparison (Any): The value registered on the test.
        subject (Any): The value under test.

    Returns:
        bool: True if the values are equal after conversion.
    """
    if strict_equals(comparison, subject):
        return True
    if comparison is None or subject is None:
        return False
    comparison, subject = _as_number(comparison), _as_number(subject)
    if _is_number(comparison) and isinstance(subject, str):
        subject = parse_number(subject)
    elif isinstance(comparison, str) and _is_number(subject):
        comparison = parse_number(comparison)
    return bool(comparison == subject)


def compare(
    comparison: Any, subject: Any, *, strict: bool, negate: bool
) -> bool:
    """Compare with the selected equality mode, optionally negated."""
    if strict:
        matched = strict_equals(comparison, subject)
    else:
        matched = loose_equals(comparison, subject)
    return matched != negate
