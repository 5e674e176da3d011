"""
Aggregate operations over sequences of rationals

Every function accepts the values either as separate arguments or as a
single iterable. Elements can be anything accepted by
:func:`~rationals.asRational` (ints, strings, fractions, floats, ...)::

    >>> from rationals import stats, of
    >>> stats.median([of(1), of(1, 2), of(1, 4), of(1, 8)])
    3/8
    >>> stats.sum(1, '1/2', of(1, 4))
    7/4

Results follow the usual approximation rules: the result is approximate
if any of the values is
"""
from __future__ import annotations

from .rational import Rational, ZERO, ONE, _collect
from . import errors

import typing as _t
if _t.TYPE_CHECKING:
    from typing import Iterable
    from .common import number_t
    values_t: _t.TypeAlias = _t.Union[Rational, number_t, Iterable]


__all__ = (
    'sum',
    'product',
    'addAll',
    'multiplyAll',
    'min',
    'max',
    'average',
    'median',
)


def sum(*values: values_t) -> Rational:
    """
    The sum of all values, :data:`~rationals.ZERO` if there are none
    """
    out = ZERO
    for value in _collect(values):
        out = out.add(value)
    return out


def product(*values: values_t) -> Rational:
    """
    The product of all values, :data:`~rationals.ONE` if there are none
    """
    out = ONE
    for value in _collect(values):
        out = out.multiply(value)
    return out


addAll = sum
multiplyAll = product


def min(*values: values_t) -> Rational:
    """
    The smallest value

    If several values are equal to the minimum, the first of them is returned

    Raises EmptyInput if there are no values
    """
    rationals = _collect(values)
    if not rationals:
        raise errors.EmptyInput("Cannot compute the minimum of an empty sequence")
    out = rationals[0]
    for value in rationals[1:]:
        if value.lt(out):
            out = value
    return out


def max(*values: values_t) -> Rational:
    """
    The largest value

    If several values are equal to the maximum, the first of them is returned

    Raises EmptyInput if there are no values
    """
    rationals = _collect(values)
    if not rationals:
        raise errors.EmptyInput("Cannot compute the maximum of an empty sequence")
    out = rationals[0]
    for value in rationals[1:]:
        if value.gt(out):
            out = value
    return out


def average(*values: values_t) -> Rational:
    """
    The arithmetic mean: ``sum(values) / len(values)``

    Raises EmptyInput if there are no values
    """
    rationals = _collect(values)
    if not rationals:
        raise errors.EmptyInput("Cannot compute the average of an empty sequence")
    return sum(rationals).divide(len(rationals))


def median(*values: values_t) -> Rational:
    """
    The median value

    For an even number of values this is the average of the two middle
    values (which may not be one of the given values)

    Raises EmptyInput if there are no values
    """
    rationals = _collect(values)
    if not rationals:
        raise errors.EmptyInput("Cannot compute the median of an empty sequence")
    rationals.sort()
    middle = len(rationals) // 2
    if len(rationals) % 2 == 1:
        return rationals[middle]
    return rationals[middle - 1].add(rationals[middle]).divide(2)
