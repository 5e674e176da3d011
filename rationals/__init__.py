"""
rationals: exact rational arithmetic with approximation tracking

    >>> from rationals import *
    >>> of(1, 10) + of(2, 10) == of(3, 10)
    True
    >>> of(1, 3).add(of(1, 6))
    1/2
    >>> PI.limitDenominator(7)
    ~22/7

See :mod:`rationals.rational` for details
"""
from .errors import *
from .rational import Rational, of, asRational, parse, ZERO, ONE, APPROX_ZERO, APPROX_ONE
from .constants import PI, E
from .mathutils import canonicalize
from .config import getConfig, resetConfig
from . import stats

__version__ = "1.0.0"
