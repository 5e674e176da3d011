"""
Irrational constants as approximate rationals

Each constant is the closest fraction with denominator 2**128 to the
real value. All are flagged as approximate, so any result computed
from them is approximate as well.

    >>> from rationals.constants import PI
    >>> r = PI * 2
    >>> r.isApproximate()
    True
    >>> float(PI)
    3.141592653589793

The precision is high enough for :meth:`~rationals.Rational.limitDenominator`
with the default max. denominator to leave them unmodified
"""
from __future__ import annotations

from .rational import Rational, ZERO, ONE, APPROX_ZERO, APPROX_ONE


__all__ = (
    'ZERO',
    'ONE',
    'APPROX_ZERO',
    'APPROX_ONE',
    'PI',
    'E',
)


_DENOMINATOR = 2**128


PI = Rational._fromRaw(1069028584064966747859680373161870783301, _DENOMINATOR, True)
"Ratio of the circumference of a circle to its diameter"

E = Rational._fromRaw(924983374546220337150911035843336795079, _DENOMINATOR, True)
"Base of the natural logarithm"
