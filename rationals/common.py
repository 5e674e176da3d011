"""
NB: this module cannot import anything from rationals itself
"""
from __future__ import annotations
import logging as _logging
import functools as _functools
import numbers as _numbers
import decimal as _decimal
from fractions import Fraction as F

import numpy as _np

import typing as _t


__all__ = (
    'getLogger',
    'F',
    'integer_t',
    'float_t',
    'exact_t',
    'number_t',
    'isIntegral',
    'isFloating',
)


integer_t: _t.TypeAlias = _t.Union[int, _np.integer]
float_t: _t.TypeAlias = _t.Union[float, _np.floating]
exact_t: _t.TypeAlias = _t.Union[int, F, _numbers.Rational, _decimal.Decimal, str]
number_t: _t.TypeAlias = _t.Union[exact_t, float_t]


def isIntegral(x) -> bool:
    """
    True if x is an integer (python int or numpy integer), bools excluded
    """
    return isinstance(x, (int, _np.integer)) and not isinstance(x, (bool, _np.bool_))


def isFloating(x) -> bool:
    """
    True if x is a binary floating point number (python float or numpy float)
    """
    return isinstance(x, (float, _np.floating))


@_functools.cache
def getLogger(name: str,
              fmt='[%(name)s:%(filename)s:%(lineno)s:%(funcName)s:%(levelname)s] %(message)s',
              filelog: str = '',
              force=True
              ) -> _logging.Logger:
    """
    Construct a logger

    Args:
        name: the name of the logger
        fmt: the format used
        filelog: if given, logging info is **also** output to this file
        force: set own handlers, even if the logger already exists

    Returns:
        the logger
    """
    logger = _logging.getLogger(name)
    if logger.hasHandlers():
        if not force:
            return logger
        logger.handlers.clear()

    logger.propagate = False
    handler = _logging.StreamHandler()
    formatter = _logging.Formatter(fmt)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if filelog:
        filehandler = _logging.FileHandler(filelog)
        filehandler.setFormatter(formatter)
        logger.addHandler(filehandler)
    return logger
