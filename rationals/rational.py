"""
Exact rational numbers with approximation tracking

A :class:`Rational` is an immutable fraction of two python ints, always
kept in canonical form: lowest terms, positive denominator, zero as ``0/1``.

    >>> from rationals import Rational, of
    >>> of(2, 4)
    1/2
    >>> of(1, 3) + of(1, 6)
    1/2
    >>> of(5, 2) ** -2
    4/25

Approximate rationals
---------------------

Each value carries an *approximate* flag. The flag is set when a value is
built from something which may already deviate from the quantity the caller
had in mind: a binary float, a constant like :data:`~rationals.constants.PI`,
an explicit approximation (:meth:`Rational.limitDenominator`,
:meth:`Rational.approximateDigits`). Any operation involving an approximate
value produces an approximate result, while exact values combined by exact
operations stay exact::

    >>> x = of(0.5)
    >>> x, x.isApproximate()
    (~1/2, True)
    >>> (x + 1).isApproximate()
    True
    >>> (of(1, 2) + 1).isApproximate()
    False

The flag does not take part in equality, ordering or hashing::

    >>> of(0.5) == of(1, 2)
    True

Interoperability
----------------

A Rational is a :class:`numbers.Rational`. Python operators accept ints,
other rationals (:class:`fractions.Fraction` or any :class:`numbers.Rational`)
and floats on either side. The result is always a Rational; floats produce
approximate results::

    >>> import numbers
    >>> isinstance(of(1, 3), numbers.Rational)
    True
    >>> of(1, 3) * 0.5
    ~1/6

"""
from __future__ import annotations
import re
import sys
import numbers
import decimal
import operator

import numpy as np

from .common import F, getLogger, isIntegral, isFloating
from . import errors
from . import mathutils
from .config import config
from ._result import Result

import typing as _t
if _t.TYPE_CHECKING:
    from typing import Iterable
    from .common import number_t


__all__ = (
    'Rational',
    'of',
    'asRational',
    'parse',
    'ZERO',
    'ONE',
    'APPROX_ZERO',
    'APPROX_ONE',
)


logger = getLogger('rationals')

_PyHASH_MODULUS = sys.hash_info.modulus
_PyHASH_INF = sys.hash_info.inf

_APPROXPREFIX = '~'

_INTEGER = re.compile(r'[+-]?[0-9]+')


def _addParts(an: int, ad: int, bn: int, bd: int) -> tuple[int, int]:
    if ad == bd:
        return an + bn, ad
    return an * bd + bn * ad, ad * bd


def _subParts(an: int, ad: int, bn: int, bd: int) -> tuple[int, int]:
    if ad == bd:
        return an - bn, ad
    return an * bd - bn * ad, ad * bd


def _mulParts(an: int, ad: int, bn: int, bd: int) -> tuple[int, int]:
    return an * bn, ad * bd


def _divParts(an: int, ad: int, bn: int, bd: int) -> tuple[int, int]:
    return an * bd, ad * bn


class Rational(numbers.Rational):
    """
    An immutable rational number with an approximate flag

    Args:
        numerator: an int, a float, a str, a Decimal, a Fraction or
            another Rational. See :meth:`Rational.of`
        denominator: if given, the value is ``numerator / denominator``
        approximate: if True, the result is flagged as approximate

    Raises DivisionByZero if the denominator is 0

    .. note::

        The constructor is a shortcut to :meth:`Rational.of`. The named
        factories (:meth:`fromInts`, :meth:`fromFloat`, :meth:`fromString`, ...)
        make the kind of input explicit
    """
    __slots__ = ('_numerator', '_denominator', '_approximate')

    def __new__(cls, numerator: number_t | Rational = 0, denominator: number_t | None = None,
                *, approximate=False):
        if denominator is None:
            out = cls.of(numerator)
        else:
            out = cls.of(numerator, denominator)
        return out.withApproximate(True) if approximate else out

    @classmethod
    def _fromParts(cls, numerator: int, denominator: int, approximate: bool) -> Rational:
        # numerator/denominator must already be canonical
        self = object.__new__(cls)
        self._numerator = numerator
        self._denominator = denominator
        self._approximate = approximate
        return self

    @classmethod
    def _fromRaw(cls, numerator: int, denominator: int, approximate: bool) -> Rational:
        num, den = mathutils.canonicalize(numerator, denominator)
        return cls._fromParts(num, den, approximate)

    # ------------------------------------------------------------------
    # Factories

    @classmethod
    def of(cls, *args) -> Rational:
        """
        Build a Rational from one or two values of any supported kind

        ==================================  =======================================
        Input                               Factory
        ==================================  =======================================
        ``of(Rational)``                    the same value, returned as is
        ``of(int)``                         :meth:`fromInt`
        ``of(float)``                       :meth:`fromFloat` (approximate)
        ``of(str)``                         :meth:`fromString`
        ``of(Decimal)``                     :meth:`fromDecimal`
        ``of(Fraction)``                    any :class:`numbers.Rational`, exact
        ``of(int, int)``                    :meth:`fromInts`
        ``of(str, str)``                    :meth:`fromStrings`
        ``of(a, b)``                        ``of(a).divide(of(b))``
        ==================================  =======================================

        Returns:
            the canonical Rational
        """
        if len(args) == 1:
            x = args[0]
            if isinstance(x, Rational):
                return x
            elif isIntegral(x):
                return cls.fromInt(x)
            elif isFloating(x):
                return cls.fromFloat(x)
            elif isinstance(x, str):
                return cls.fromString(x)
            elif isinstance(x, decimal.Decimal):
                return cls.fromDecimal(x)
            elif isinstance(x, numbers.Rational):
                return cls.fromInts(x.numerator, x.denominator)
            raise TypeError(f"Could not convert {x} (type {type(x).__name__}) to a rational")
        elif len(args) == 2:
            num, den = args
            if isinstance(num, str) and isinstance(den, str):
                return cls.fromStrings(num, den)
            elif isIntegral(num) and isIntegral(den):
                return cls.fromInts(num, den)
            return cls.of(num).divide(cls.of(den))
        raise TypeError(f"Expected one or two arguments, got {len(args)}")

    @classmethod
    def fromInts(cls, numerator: int, denominator: int) -> Rational:
        """
        Build a Rational from a numerator and a denominator

        The sign is moved to the numerator and the fraction is reduced

        Args:
            numerator: any integer
            denominator: any integer except 0

        Returns:
            the exact Rational numerator/denominator

        Raises DivisionByZero if denominator is 0
        """
        num, den = mathutils.canonicalize(operator.index(numerator), operator.index(denominator))
        return cls._fromParts(num, den, False)

    @classmethod
    def fromInt(cls, integer: int) -> Rational:
        """
        Build an integer Rational (denominator 1)

        Any integer type is accepted (python int, numpy integers or
        anything implementing ``__index__``)
        """
        return cls._fromParts(operator.index(integer), 1, False)

    @classmethod
    def fromFloat(cls, x: float) -> Rational:
        """
        Build a Rational from the exact binary value of a float

        The result represents **exactly** the value stored in the float,
        including the error inherent to its binary representation. For
        that reason it is always flagged as approximate::

            >>> Rational.fromFloat(0.1)
            ~3602879701896397/36028797018963968
            >>> Rational.fromFloat(0.5)
            ~1/2

        Numpy scalars are converted at their own precision, so an
        ``np.longdouble`` keeps all of its mantissa bits

        Args:
            x: a python float or a numpy floating scalar

        Returns:
            the approximate Rational

        Raises InvalidValue if x is nan or infinite
        """
        if not isinstance(x, np.floating):
            x = float(x)
        if np.isnan(x):
            raise errors.InvalidValue("NaN can't be converted to a rational")
        if np.isinf(x):
            raise errors.InvalidValue("A rational can't be infinite")
        num, den = x.as_integer_ratio()
        num, den = int(num), int(den)
        return cls._fromRaw(num, den, True)

    @classmethod
    def fromString(cls, s: str) -> Rational:
        """
        Parse a decimal number or a fraction

        Accepted formats: ``'3'``, ``'-1.25'``, ``'1e-3'``, ``'2.5E+10'``,
        ``'3/4'``, ``'-10/6'``. A leading ``'~'`` marks the result as
        approximate (this is how approximate values are shown by ``repr``).
        The result is exact unless marked::

            >>> Rational.fromString('0.1')
            1/10
            >>> Rational.fromString('1.50')
            3/2

        Args:
            s: the text to parse

        Returns:
            the parsed Rational

        Raises ParseError if s is malformed, DivisionByZero for a fraction
        with a 0 denominator
        """
        if not isinstance(s, str):
            raise TypeError(f"Expected a str, got {s!r}")
        text = s.strip()
        approximate = text.startswith(_APPROXPREFIX)
        if approximate:
            text = text[len(_APPROXPREFIX):]
        try:
            f = F(text)
        except ZeroDivisionError as e:
            raise errors.DivisionByZero(f"Denominator can't be 0 in '{s}'") from e
        except ValueError as e:
            logger.debug("Could not parse %r: %s", s, e)
            raise errors.ParseError(f"Could not parse '{s}' as a rational") from e
        return cls._fromRaw(f.numerator, f.denominator, approximate)

    @classmethod
    def fromStrings(cls, numerator: str, denominator: str) -> Rational:
        """
        Build a Rational from the text of an integer numerator and denominator

            >>> Rational.fromStrings('12', '-8')
            -3/2

        Each string must be an optional sign followed by ascii digits, without
        whitespace or underscores

        Raises ParseError if any of the strings is not an integer,
        DivisionByZero if the denominator is 0
        """
        if not isinstance(numerator, str) or not isinstance(denominator, str):
            raise TypeError(f"Expected two str, got {numerator!r}, {denominator!r}")
        for text in (numerator, denominator):
            if not _INTEGER.fullmatch(text):
                logger.debug("Could not parse %r / %r: %r is not an integer",
                             numerator, denominator, text)
                raise errors.ParseError(f"Could not parse '{numerator}/{denominator}' "
                                        f"as a rational")
        return cls.fromInts(int(numerator), int(denominator))

    @classmethod
    def fromDecimal(cls, d: decimal.Decimal) -> Rational:
        """
        Build the exact Rational equivalent to a Decimal

        The scale of the decimal is lost: ``Decimal('0.700')`` and
        ``Decimal('0.7')`` both give 7/10

        Raises InvalidValue if d is nan or infinite
        """
        if not d.is_finite():
            raise errors.InvalidValue(f"{d} can't be converted to a rational")
        num, den = d.as_integer_ratio()
        return cls._fromRaw(num, den, False)

    # ------------------------------------------------------------------
    # Properties and metadata

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def approximate(self) -> bool:
        """True if this value may deviate from the intended value"""
        return self._approximate

    def isApproximate(self) -> bool:
        return self._approximate

    def isInteger(self) -> bool:
        return self._denominator == 1

    def isZero(self) -> bool:
        return self._numerator == 0

    def signum(self) -> int:
        """-1, 0 or 1 as this value is negative, zero or positive"""
        n = self._numerator
        return (n > 0) - (n < 0)

    def magnitude(self) -> Rational:
        """The absolute value, as a non-negative Rational"""
        return self.abs()

    def bitLength(self) -> int:
        """
        Number of bits of numerator and denominator, excluding the sign

        A rough measure of the cost of operating with this value. Long chains of
        operations can produce rationals whose numerator and denominator are
        huge even if the value itself is not; see :meth:`limitDenominator`
        """
        return self._numerator.bit_length() + self._denominator.bit_length()

    def withApproximate(self, approximate=True) -> Rational:
        """
        This value with the approximate flag set to the given value

        Clearing the flag asserts that the value is known to be exact
        """
        approximate = bool(approximate)
        if approximate == self._approximate:
            return self
        return Rational._fromParts(self._numerator, self._denominator, approximate)

    def canonicalForm(self) -> Rational:
        """
        The canonical form of this value

        Every Rational is already canonical, so this returns self. Provided
        for symmetry with :func:`rationals.mathutils.canonicalize`
        """
        return self

    # ------------------------------------------------------------------
    # Arithmetic

    def add(self, other: Rational | number_t) -> Rational:
        """Returns ``self + other``"""
        other = asRational(other)
        num, den = _addParts(self._numerator, self._denominator, other._numerator, other._denominator)
        return Rational._fromRaw(num, den, self._approximate or other._approximate)

    def subtract(self, other: Rational | number_t) -> Rational:
        """Returns ``self - other``"""
        other = asRational(other)
        num, den = _subParts(self._numerator, self._denominator, other._numerator, other._denominator)
        return Rational._fromRaw(num, den, self._approximate or other._approximate)

    def multiply(self, other: Rational | number_t) -> Rational:
        """Returns ``self * other``"""
        other = asRational(other)
        num, den = _mulParts(self._numerator, self._denominator, other._numerator, other._denominator)
        return Rational._fromRaw(num, den, self._approximate or other._approximate)

    def divide(self, other: Rational | number_t) -> Rational:
        """
        Returns ``self / other``

        Raises DivisionByZero if other is zero
        """
        other = asRational(other)
        if other._numerator == 0:
            raise errors.DivisionByZero(f"Division by 0 ({self} / {other})")
        num, den = _divParts(self._numerator, self._denominator, other._numerator, other._denominator)
        return Rational._fromRaw(num, den, self._approximate or other._approximate)

    def negate(self) -> Rational:
        if self._numerator == 0:
            return self
        return Rational._fromParts(-self._numerator, self._denominator, self._approximate)

    def inverse(self) -> Rational:
        """
        Returns ``1 / self``

        Raises DivisionByZero if self is zero
        """
        num, den = self._numerator, self._denominator
        if num == 0:
            raise errors.DivisionByZero("Can't invert 0")
        if num < 0:
            num, den = -num, -den
        return Rational._fromParts(den, num, self._approximate)

    def abs(self) -> Rational:
        if self._numerator >= 0:
            return self
        return Rational._fromParts(-self._numerator, self._denominator, self._approximate)

    def pow(self, exponent: int) -> Rational:
        """
        Raise this value to an integer power

        ``x.pow(0)`` is :data:`ONE` for any x, including 0 and approximate values.
        A negative exponent inverts first: ``x.pow(-n) == x.inverse().pow(n)``

        Args:
            exponent: an integer

        Returns:
            ``self ** exponent``

        Raises DivisionByZero if self is zero and exponent is negative
        """
        exponent = operator.index(exponent)
        if exponent == 0:
            return ONE
        if exponent == 1:
            return self
        num, den = self._numerator, self._denominator
        if exponent > 0:
            return Rational._fromParts(num ** exponent, den ** exponent, self._approximate)
        if num == 0:
            raise errors.DivisionByZero("0 can't be raised to a negative power")
        exponent = -exponent
        num, den = den ** exponent, num ** exponent
        if den < 0:
            num, den = -num, -den
        return Rational._fromParts(num, den, self._approximate)

    def addAll(self, *values: Rational | number_t | Iterable) -> Rational:
        """
        Add all given values to this one

        The values can be given as arguments or as one iterable
        """
        out = self
        for value in _collect(values):
            out = out.add(value)
        return out

    def multiplyAll(self, *values: Rational | number_t | Iterable) -> Rational:
        """
        Multiply this value by all the given values

        The values can be given as arguments or as one iterable
        """
        out = self
        for value in _collect(values):
            out = out.multiply(value)
        return out

    def min(self, other: Rational | number_t) -> Rational:
        """self if ``self <= other``, other otherwise"""
        other = asRational(other)
        return self if self.compareTo(other) <= 0 else other

    def max(self, other: Rational | number_t) -> Rational:
        """self if ``self >= other``, other otherwise"""
        other = asRational(other)
        return self if self.compareTo(other) >= 0 else other

    # ------------------------------------------------------------------
    # Comparison

    def compareTo(self, other: Rational | number_t) -> int:
        """
        Compare two values exactly

        The approximate flag is ignored

        Returns:
            -1, 0 or 1 as self is less than, equal to or greater than other
        """
        other = asRational(other)
        if other is self:
            return 0
        sa, sb = self.signum(), other.signum()
        if sa != sb:
            return -1 if sa < sb else 1
        if self._denominator == other._denominator:
            lhs, rhs = self._numerator, other._numerator
        else:
            lhs = self._numerator * other._denominator
            rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def equals(self, other) -> bool:
        """
        Value equality. The approximate flag is ignored

        Returns False for anything which is not a number
        """
        result = self.__eq__(other)
        return False if result is NotImplemented else result

    def lt(self, other: Rational | number_t) -> bool:
        return self.compareTo(other) < 0

    def le(self, other: Rational | number_t) -> bool:
        return self.compareTo(other) <= 0

    def gt(self, other: Rational | number_t) -> bool:
        return self.compareTo(other) > 0

    def ge(self, other: Rational | number_t) -> bool:
        return self.compareTo(other) >= 0

    def isclose(self, other: Rational | number_t, tolerance: Rational | number_t | None = None
                ) -> bool:
        """
        True if ``|self - other| <= tolerance``

        Args:
            other: the value to compare to
            tolerance: max. absolute difference. If not given, the tolerance
                configured as ``getConfig().tolerance`` is used

        Returns:
            True if both values are within the tolerance
        """
        if tolerance is None:
            tolerance = config.toleranceValue()
        return self.subtract(other).abs().le(tolerance)

    def isNearZero(self, tolerance: Rational | number_t | None = None) -> bool:
        """True if this value is within tolerance of :data:`APPROX_ZERO`"""
        return self.isclose(APPROX_ZERO, tolerance)

    def isNearOne(self, tolerance: Rational | number_t | None = None) -> bool:
        """True if this value is within tolerance of :data:`APPROX_ONE`"""
        return self.isclose(APPROX_ONE, tolerance)

    # ------------------------------------------------------------------
    # Conversion

    def toInt(self) -> int:
        """
        This value as an int, truncated toward zero

        This is lossy if the value is not an integer (see :meth:`isInteger`)
        """
        return mathutils.truncDiv(self._numerator, self._denominator)

    def toFixedInt(self, dtype=np.int64) -> np.integer:
        """
        This value as a fixed width numpy integer, truncated toward zero

        Args:
            dtype: a numpy integer type (np.int8, np.int32, np.uint64, ...)

        Returns:
            the truncated value, as a numpy scalar of the given type

        Raises Overflow if the truncated value is out of range for dtype
        """
        info = np.iinfo(dtype)
        value = self.toInt()
        if not info.min <= value <= info.max:
            raise errors.Overflow(f"{self} is out of the range of {info.dtype.name} "
                                  f"({info.min}, {info.max})")
        return info.dtype.type(value)

    def intValue(self) -> np.int32:
        """This value as a 32 bit integer, see :meth:`toFixedInt`"""
        return self.toFixedInt(np.int32)

    def longValue(self) -> np.int64:
        """This value as a 64 bit integer, see :meth:`toFixedInt`"""
        return self.toFixedInt(np.int64)

    def toFloat(self, dtype=np.float64) -> np.floating:
        """
        The nearest floating point value of the given type

        The rounding (to nearest, ties to even) is performed on the exact
        numerator and denominator, so the result is correctly rounded even
        when these exceed the range of the float type. Values too small
        for the type are rounded as subnormals.

        Args:
            dtype: a numpy float type: np.float16, np.float32 or np.float64

        Returns:
            the value as a numpy scalar of the given type

        Raises Overflow if the rounded value is beyond the finite range of dtype
        """
        info = np.finfo(dtype)
        if info.nmant > 52:
            raise TypeError(f"Float type {info.dtype.name} is not supported")
        try:
            value = mathutils.nearestBinary(self._numerator, self._denominator,
                                            nmant=int(info.nmant), minexp=int(info.minexp))
        except OverflowError as e:
            raise errors.Overflow(f"{self} is out of the range of {info.dtype.name}") from e
        if abs(value) > float(info.max):
            raise errors.Overflow(f"{self} is out of the range of {info.dtype.name}")
        return info.dtype.type(value)

    def floatValue(self) -> np.float32:
        """This value as a single precision float, see :meth:`toFloat`"""
        return self.toFloat(np.float32)

    def doubleValue(self) -> float:
        """This value as a python float (double precision), see :meth:`toFloat`"""
        return float(self.toFloat(np.float64))

    def toDecimal(self) -> decimal.Decimal:
        """
        The exact value as a Decimal

        Only possible if the fraction has a finite decimal expansion, that is,
        if the prime factors of the denominator are only 2 and 5

        Raises InexactConversion otherwise
        """
        scale = self._decimalScale()
        digits = self._numerator * 10**scale // self._denominator
        return decimal.Decimal(f'{digits}e{-scale}')

    def toDecimalString(self) -> str:
        """
        The exact value in plain decimal notation

            >>> of(-5, 8).toDecimalString()
            '-0.625'

        Raises InexactConversion if the value has no finite decimal expansion
        """
        scale = self._decimalScale()
        digits = str(abs(self._numerator) * 10**scale // self._denominator)
        if scale:
            digits = digits.rjust(scale + 1, '0')
            digits = f'{digits[:-scale]}.{digits[-scale:]}'
        return '-' + digits if self._numerator < 0 else digits

    def _decimalScale(self) -> int:
        scale = mathutils.decimalScale(self._denominator)
        if scale is None:
            raise errors.InexactConversion(f"{self} has no finite decimal representation")
        return scale

    def decimalExpansion(self) -> str:
        """
        The decimal expansion of this value, marking any repeating period with '('

            >>> of(1, 6).decimalExpansion()
            '0.1(6'
        """
        return mathutils.fractionToDecimal(self._numerator, self._denominator)

    def approximateDigits(self, precision: int | Rational | number_t) -> Rational:
        """
        Round this value to a given precision

        Rounding is to nearest, ties to even. The result is flagged as
        approximate if the value changed by rounding (or if self or the
        precision were approximate already)

            >>> of(2, 3).approximateDigits(3)
            ~667/1000
            >>> of(2, 3).approximateDigits(of(1, 8))
            ~5/8
            >>> of(5, 4).approximateDigits(4)
            5/4

        Args:
            precision: either an int, the number of significant decimal digits
                to keep, or a positive Rational, the step to round to (the result
                is the nearest multiple of it)

        Returns:
            the rounded value

        Raises InvalidValue if precision is less than 1 digit or the step is
        not positive
        """
        num, den = self._numerator, self._denominator
        if isIntegral(precision):
            digits = int(precision)
            if digits < 1:
                raise errors.InvalidValue(f"At least one significant digit is needed, got {digits}")
            if num == 0:
                return self
            exp = mathutils.decimalExponent(num, den) - digits
            stepnum, stepden = (10**exp, 1) if exp >= 0 else (1, 10**-exp)
            stepapprox = False
        else:
            step = asRational(precision)
            if step.signum() <= 0:
                raise errors.InvalidValue(f"The precision step must be positive, got {step}")
            stepnum, stepden, stepapprox = step._numerator, step._denominator, step._approximate
        q = mathutils.roundHalfEven(num * stepden, den * stepnum)
        newnum, newden = mathutils.canonicalize(q * stepnum, stepden)
        changed = (newnum, newden) != (num, den)
        if changed:
            logger.debug("Rounded %s to %s/%s (precision: %s)", self, newnum, newden, precision)
        approximate = self._approximate or stepapprox or changed
        if not changed and approximate == self._approximate:
            return self
        return Rational._fromParts(newnum, newden, approximate)

    def limitDenominator(self, maxDenominator: int | None = None) -> Rational:
        """
        The closest value with a denominator not greater than maxDenominator

        Useful after long chains of operations, which may lead to
        rationals backed by huge integers, slow to operate with.
        Returns self if the denominator is already within the limit, otherwise
        the result is flagged as approximate

            >>> from rationals.constants import PI
            >>> PI.limitDenominator(113)
            ~355/113

        Args:
            maxDenominator: the max. denominator, included. If not given,
                ``getConfig().maxDenominator`` is used (2**128 by default)

        Returns:
            the closest value with a denominator within the limit

        Raises InvalidValue if maxDenominator < 1
        """
        if maxDenominator is None:
            maxDenominator = config.maxDenominator
        maxden = operator.index(maxDenominator)
        if maxden < 1:
            raise errors.InvalidValue(f"The max. denominator must be at least 1, got {maxden}")
        if self._denominator <= maxden:
            return self
        num, den = mathutils.limitDenominator(self._numerator, self._denominator, maxden,
                                              assumeCoprime=True)
        logger.debug("Limited denominator of %s to %s/%s", self, num, den)
        return Rational._fromRaw(num, den, True)

    def toString(self) -> str:
        """
        Canonical text form: ``'numerator/denominator'``, or ``'numerator'`` for integers

        The approximate flag is not part of this form. :meth:`fromString` parses it back
        """
        if self._denominator == 1:
            return str(self._numerator)
        return f'{self._numerator}/{self._denominator}'

    # ------------------------------------------------------------------
    # Python protocols

    def __str__(self) -> str:
        return self.toString()

    def __repr__(self) -> str:
        style = config.reprStyle
        if style == 'constructor':
            flag = ', approximate=True' if self._approximate else ''
            return f'{type(self).__name__}({self._numerator}, {self._denominator}{flag})'
        prefix = config.reprApproximatePrefix if self._approximate else ''
        if style == 'float' and self._denominator != 1:
            try:
                floatpart = f"{self.doubleValue():.{config.reprFloatDigits}g}"
            except errors.Overflow:
                return prefix + self.toString()
            if Rational.fromString(floatpart) != self:
                floatpart += '…'
            return prefix + floatpart
        return prefix + self.toString()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.toString()
        return float(self).__format__(format_spec)

    def __hash__(self) -> int:
        # Same hash as int, float and Fraction for equal values
        try:
            dinv = pow(self._denominator, -1, _PyHASH_MODULUS)
        except ValueError:
            hash_ = _PyHASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return (self._numerator == other._numerator and
                    self._denominator == other._denominator)
        if isinstance(other, numbers.Rational):
            other = asRational(other)
            return (self._numerator == other._numerator and
                    self._denominator == other._denominator)
        if isFloating(other):
            if np.isnan(other) or np.isinf(other):
                return False
            return self == Rational.fromFloat(other)
        if isinstance(other, numbers.Complex) and other.imag == 0:
            return self == other.real
        return NotImplemented

    def _richcmp(self, other, op) -> bool:
        if isinstance(other, (Rational, numbers.Rational)):
            return op(self.compareTo(other), 0)
        if isFloating(other):
            if np.isnan(other) or np.isinf(other):
                return op(0.0, other)
            return op(self.compareTo(Rational.fromFloat(other)), 0)
        return NotImplemented

    def __lt__(self, other) -> bool:
        return self._richcmp(other, operator.lt)

    def __le__(self, other) -> bool:
        return self._richcmp(other, operator.le)

    def __gt__(self, other) -> bool:
        return self._richcmp(other, operator.gt)

    def __ge__(self, other) -> bool:
        return self._richcmp(other, operator.ge)

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __add__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def _divmod(self, other: Rational) -> tuple[int, Rational]:
        if other._numerator == 0:
            raise errors.DivisionByZero(f"Division by 0 ({self} // {other})")
        an, ad, bn, bd = self._numerator, self._denominator, other._numerator, other._denominator
        q, r = divmod(an * bd, ad * bn)
        rem = Rational._fromRaw(r, ad * bd, self._approximate or other._approximate)
        return q, rem

    def __floordiv__(self, other) -> int:
        other = _coerce(other)
        return NotImplemented if other is None else self._divmod(other)[0]

    def __rfloordiv__(self, other) -> int:
        other = _coerce(other)
        return NotImplemented if other is None else other._divmod(self)[0]

    def __mod__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else self._divmod(other)[1]

    def __rmod__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else other._divmod(self)[1]

    def __divmod__(self, other) -> tuple[int, Rational]:
        other = _coerce(other)
        return NotImplemented if other is None else self._divmod(other)

    def __rdivmod__(self, other) -> tuple[int, Rational]:
        other = _coerce(other)
        return NotImplemented if other is None else other._divmod(self)

    def __pow__(self, other) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if other._denominator == 1:
            out = self.pow(other._numerator)
            return out.withApproximate(True) if other._approximate else out
        # A non integer exponent leaves the rationals
        if self._numerator < 0:
            raise errors.InvalidValue(f"Can't raise a negative value ({self}) to a "
                                      f"non integer power ({other})")
        if self._numerator == 0:
            if other._numerator < 0:
                raise errors.DivisionByZero("0 can't be raised to a negative power")
            return ZERO.withApproximate(self._approximate or other._approximate)
        try:
            value = self.doubleValue() ** other.doubleValue()
        except OverflowError as e:
            raise errors.Overflow(f"{self} ** {other} is out of range") from e
        return Rational.fromFloat(value)

    def __rpow__(self, other) -> Rational:
        other = _coerce(other)
        return NotImplemented if other is None else other.__pow__(self)

    def __neg__(self) -> Rational:
        return self.negate()

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return self.abs()

    def __float__(self) -> float:
        return self.doubleValue()

    def __int__(self) -> int:
        return self.toInt()

    def __trunc__(self) -> int:
        return self.toInt()

    def __floor__(self) -> int:
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        return -(-self._numerator // self._denominator)

    def __round__(self, ndigits: int | None = None):
        if ndigits is None:
            return mathutils.roundHalfEven(self._numerator, self._denominator)
        shift = 10**abs(ndigits)
        if ndigits > 0:
            num = mathutils.roundHalfEven(self._numerator * shift, self._denominator)
            return Rational._fromRaw(num, shift, self._approximate)
        else:
            num = mathutils.roundHalfEven(self._numerator, self._denominator * shift)
            return Rational._fromParts(num * shift, 1, self._approximate)

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo) -> Rational:
        return self

    def __reduce__(self):
        return (_restore, (self._numerator, self._denominator, self._approximate))


def _restore(numerator: int, denominator: int, approximate: bool) -> Rational:
    return Rational._fromRaw(numerator, denominator, approximate)


def _coerce(x) -> Rational | None:
    """
    Convert the other operand of a python operator, None if not supported
    """
    if isinstance(x, Rational):
        return x
    if isinstance(x, numbers.Rational) or isFloating(x) or isinstance(x, decimal.Decimal):
        return Rational.of(x)
    return None


def _collect(values: tuple) -> list[Rational]:
    """
    Values given as varargs or as a single iterable, as a list of Rationals
    """
    if len(values) == 1 and not isinstance(values[0], (numbers.Number, str, decimal.Decimal)):
        values = values[0]
    return [asRational(value) for value in values]


def asRational(x: Rational | number_t) -> Rational:
    """
    Convert x to a Rational if needed

    A Rational is returned unchanged, anything else is passed to :meth:`Rational.of`
    """
    if isinstance(x, Rational):
        return x
    return Rational.of(x)


def of(*args) -> Rational:
    """
    Build a Rational, see :meth:`Rational.of`
    """
    return Rational.of(*args)


def parse(text: str) -> Result[Rational]:
    """
    Parse text as a Rational, without raising

    Example
    -------

    .. code::

        if r := parse("4/5"):
            print(f"Rational ok: {r.value}")   # prints 'Rational ok: 4/5'
        else:
            print(r.info)

    Args:
        text: anything accepted by :meth:`Rational.fromString`

    Returns:
        a :class:`~rationals._result.Result` holding the parsed value, or the
        reason of the failure
    """
    try:
        return Result.Ok(Rational.fromString(text))
    except (errors.ParseError, errors.DivisionByZero, TypeError) as e:
        return Result.Fail(str(e))


ZERO = Rational._fromParts(0, 1, False)
"Exact 0"

ONE = Rational._fromParts(1, 1, False)
"Exact 1"

APPROX_ZERO = Rational._fromParts(0, 1, True)
"0, flagged approximate. Reference for :meth:`Rational.isNearZero`"

APPROX_ONE = Rational._fromParts(1, 1, True)
"1, flagged approximate. Reference for :meth:`Rational.isNearOne`"
