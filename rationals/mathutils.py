"""
Integer helpers operating on raw (numerator, denominator) pairs

All functions here work on python ints and never build a Rational. They
are the building blocks of the rounding, approximation and conversion
methods of :class:`rationals.Rational`
"""
from __future__ import annotations
import math

from .errors import DivisionByZero


__all__ = (
    'canonicalize',
    'truncDiv',
    'roundHalfEven',
    'limitDenominator',
    'decimalExponent',
    'decimalScale',
    'nearestBinary',
    'fractionToDecimal',
)


def canonicalize(num: int, den: int) -> tuple[int, int]:
    """
    Reduce num/den to lowest terms, with a positive denominator

    Zero is always returned as (0, 1)

    Args:
        num: the numerator
        den: the denominator. Raises DivisionByZero if 0

    Returns:
        a tuple (numerator, denominator) where gcd(|numerator|, denominator) == 1
        and denominator > 0
    """
    if den == 0:
        raise DivisionByZero(f"Denominator can't be 0 ({num}/{den})")
    if num == 0:
        return 0, 1
    if den < 0:
        num, den = -num, -den
    g = math.gcd(num, den)
    if g != 1:
        num //= g
        den //= g
    return num, den


def truncDiv(num: int, den: int) -> int:
    """
    Integer division of num by den, rounding toward zero

    den must be positive
    """
    q = abs(num) // den
    return q if num >= 0 else -q


def roundHalfEven(num: int, den: int) -> int:
    """
    Round num/den to the nearest integer, ties to even

    Args:
        num: the numerator
        den: the denominator, must be positive

    Returns:
        the rounded integer
    """
    floor, remainder = divmod(num, den)
    if remainder*2 < den:
        return floor
    elif remainder*2 > den:
        return floor+1
    # Deal with the half case:
    elif floor % 2 == 0:
        return floor
    else:
        return floor+1


def limitDenominator(num: int, den: int, maxden: int, assumeCoprime=False) -> tuple[int, int]:
    """
    Closest fraction to num/den with a denominator at most maxden

    Uses the continued fraction expansion of num/den, the same algorithm
    as python's ``fractions.Fraction.limit_denominator``

    Args:
        num: The numerator of the fraction.
        den: The denominator of the fraction (positive).
        maxden: The maximum denominator allowed.
        assumeCoprime: Whether to assume the fraction is already in its simplest form.

    Returns:
        the closest fraction as a tuple (numerator, denominator)
    """
    if maxden < 1:
        raise ValueError("maxden should be at least 1")

    if not assumeCoprime:
        num, den = canonicalize(num, den)

    if den <= maxden:
        return num, den

    p0, q0, p1, q1 = 0, 1, 1, 0
    n, d = num, den
    while True:
        a = n // d
        q2 = q0 + a * q1
        if q2 > maxden:
            break
        p0, q0, p1, q1 = p1, q1, p0 + a * p1, q2
        n, d = d, n - a*d

    k = (maxden - q0) // q1

    # Determine which of the candidates (p0+k*p1)/(q0+k*q1) and p1/q1 is
    # closer to num/den. The distance between them is 1/(q1*(q0+k*q1)), while
    # the distance from p1/q1 to num/den is d/(q1*den). So we
    # need to compare 2*(q0+k*q1) with den/d.
    if 2 * d * (q0 + k * q1) <= den:
        return p1, q1
    else:
        return p0 + k * p1, q0 + k * q1


def decimalExponent(num: int, den: int) -> int:
    """
    The exponent k such that 10**(k-1) <= |num/den| < 10**k

    num must not be 0, den must be positive. For example, the exponent of 123
    is 3, the exponent of 0.05 is -1
    """
    a = abs(num)
    k = len(str(a)) - len(str(den))
    # here 10**(k-1) < a/den < 10**(k+1)
    if k >= 0:
        above = a >= den * 10**k
    else:
        above = a * 10**-k >= den
    return k + 1 if above else k


def decimalScale(den: int) -> int | None:
    """
    The number of decimal places needed to write 1/den exactly

    Args:
        den: a positive denominator

    Returns:
        the number of decimal places, or None if 1/den has no finite decimal
        expansion (den has a prime factor other than 2 and 5)
    """
    twos = fives = 0
    while den % 2 == 0:
        den //= 2
        twos += 1
    while den % 5 == 0:
        den //= 5
        fives += 1
    return max(twos, fives) if den == 1 else None


def nearestBinary(num: int, den: int, nmant: int, minexp: int) -> float:
    """
    Round num/den to the nearest binary floating point value, ties to even

    The rounding is done in integer arithmetic over the exact fraction,
    so large numerators and denominators do not lose precision.

    Args:
        num: the numerator
        den: the denominator, positive
        nmant: number of explicit mantissa bits of the target format (52 for
            double, 23 for single precision)
        minexp: the exponent of the smallest normal number (-1022 for double,
            -126 for single). Values below are rounded as subnormals

    Returns:
        the rounded value as a python float. Since the result has at most
        nmant+1 significant bits it is exact for any nmant <= 52. Raises
        OverflowError if the rounded value exceeds the range of a double
    """
    if num == 0:
        return 0.
    a = abs(num)
    e = a.bit_length() - den.bit_length()
    # 2**e <= a/den < 2**(e+1)
    if e >= 0:
        if a < den << e:
            e -= 1
    elif a << -e < den:
        e -= 1
    shift = nmant - max(e, minexp)
    if shift >= 0:
        q = roundHalfEven(a << shift, den)
    else:
        q = roundHalfEven(a, den << -shift)
    value = math.ldexp(q, -shift)
    return value if num > 0 else -value


def fractionToDecimal(numerator: int, denominator: int) -> str:
    """
    Converts a fraction to a decimal number with repeating period

    Args:
        numerator: the numerator of the fraction
        denominator: the denominator of the fraction (positive)

    Returns:
        the string representation of the resulting decimal. Any repeating
        period will be prefixed with '('

    Example
    ~~~~~~~

        >>> fractionToDecimal(1, 3)
        '0.(3'
        >>> fractionToDecimal(1, 7)
        '0.(142857'
        >>> fractionToDecimal(-100, 7)
        '-14.(285714'
        >>> fractionToDecimal(1, 8)
        '0.125'
        >>> fractionToDecimal(6, 2)
        '3'
    """
    sign = '-' if numerator < 0 else ''
    intpart, numerator = divmod(abs(numerator), denominator)
    if numerator == 0:
        return f'{sign}{intpart}'
    result = [f'{sign}{intpart}.']
    seen = {numerator: 1}
    while numerator != 0:
        numerator *= 10
        digit, numerator = divmod(numerator, denominator)
        result.append(str(digit))
        if numerator in seen:
            result.insert(seen[numerator], "(")
            break
        seen[numerator] = len(result)
    return "".join(result)
