"""
Configuration for rationals
===========================

There is one active configuration, an instance of :class:`RationalsConfig`.
Settings are read at call time, so modifying the config affects every
subsequent operation::

    >>> from rationals import getConfig, PI
    >>> config = getConfig()
    >>> config.reprStyle = 'float'
    >>> PI
    ~3.1415927…

Values are validated on assignment regarding their type and accepted values,
range, etc. An attempt to set an unknown setting also results in an error::

    >>> config.reprStyle = 'foo'
    ValidationError: 1 validation error for RationalsConfig
    reprStyle
      Input should be 'fraction', 'float' or 'constructor' ...

The config is not persistent: every session starts with the defaults. Use
:func:`resetConfig` to go back to them.
"""
from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import F


def isValidFraction(val: str) -> bool:
    """
    True if val can be interpreted as a non-negative fraction
    """
    try:
        return F(val) >= 0
    except (ValueError, TypeError, ZeroDivisionError):
        return False


class RationalsConfig(BaseModel):
    """
    Settings for rationals

    Args:
        maxDenominator: default max. denominator used by Rational.limitDenominator
        tolerance: default tolerance used by isclose, isNearZero and isNearOne
        reprStyle: how a Rational is shown by repr
        reprApproximatePrefix: prefix added to the repr of an approximate Rational
        reprFloatDigits: significant digits used by the "float" repr style
    """
    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    maxDenominator: int = Field(default=2**128, ge=1)
    """Default max. denominator used by Rational.limitDenominator"""

    tolerance: str = '1e-36'
    """
    Default tolerance used by isclose, isNearZero and isNearOne. Any string
    which can be parsed as a non-negative fraction ("1e-36", "1/1000")
    """

    reprStyle: Literal['fraction', 'float', 'constructor'] = 'fraction'
    """
    How a Rational is shown by repr: "fraction" (3/4), "float" (0.75) or
    "constructor" (Rational(3, 4))
    """

    reprApproximatePrefix: str = '~'
    """Prefix added to the repr of an approximate Rational ("fraction" and "float" styles)"""

    reprFloatDigits: int = Field(default=8, ge=1, le=40)
    """Significant digits used by the "float" repr style"""

    @field_validator('tolerance')
    @classmethod
    def _checkTolerance(cls, value: str) -> str:
        if not isValidFraction(value):
            raise ValueError(f"tolerance should be a non-negative fraction, got '{value}'")
        return value

    def toleranceValue(self) -> F:
        """The tolerance, as a fraction"""
        return F(self.tolerance)


config = RationalsConfig()


def getConfig() -> RationalsConfig:
    """
    Returns the active configuration
    """
    return config


def resetConfig() -> None:
    """
    Set all settings of the active configuration back to their defaults
    """
    for name, field in RationalsConfig.model_fields.items():
        setattr(config, name, field.default)
