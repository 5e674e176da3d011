"""
Exceptions raised by rationals

Every exception derives from :class:`RationalError` and, additionally, from
the builtin exception closest to its meaning. This makes it possible to
catch either the specific kind or the generic builtin::

    >>> from rationals import Rational, errors
    >>> try:
    ...     Rational(1, 0)
    ... except ZeroDivisionError as e:
    ...     isinstance(e, errors.DivisionByZero)
    True

"""
from __future__ import annotations


__all__ = (
    'RationalError',
    'DivisionByZero',
    'ParseError',
    'InvalidValue',
    'Overflow',
    'InexactConversion',
    'EmptyInput',
)


class RationalError(Exception):
    """Base class for all errors raised by this package"""


class DivisionByZero(RationalError, ZeroDivisionError):
    """A zero denominator, a division by zero or the inverse of zero"""


class ParseError(RationalError, ValueError):
    """Malformed text given to a string based factory"""


class InvalidValue(RationalError, ValueError):
    """A value which cannot be represented or used: nan, infinity, invalid precision"""


class Overflow(RationalError, OverflowError):
    """A narrowing conversion outside of the range of the target type"""


class InexactConversion(RationalError, ValueError):
    """An exact conversion requested for a value which has no exact representation"""


class EmptyInput(RationalError, ValueError):
    """An aggregate without identity (min, max, average, median) over an empty sequence"""
