"""Per-period parameter resolution with a hold-last-value rule."""

from __future__ import annotations

from numbers import Number
from typing import Iterable, Optional, Union

Values = Union[Iterable[float], float, None]


def as_values(values: Values) -> tuple:
    """
    Normalize a broadcastable input to a tuple.

    ``None`` and an empty sequence both mean "unset" and give ``()``; a bare
    number is a single value held for the whole leg. One-shot iterators are
    consumed here, so builders call this once per input before walking the
    periods.
    """
    if values is None:
        return ()
    if isinstance(values, Number):
        return (values,)
    return tuple(values)


def resolve(values: Values, index: int, default: Optional[float] = None):
    """
    Return the value for period ``index``.

    - no values: ``default``
    - ``index`` within range: the value at ``index``
    - past the end: the last value, held until maturity
    """
    if not isinstance(values, tuple):
        values = as_values(values)
    if not values:
        return default
    if index < len(values):
        return values[index]
    return values[-1]


__all__ = ["as_values", "resolve"]
