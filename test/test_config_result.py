import logging

import pytest
from pydantic import ValidationError

from rationals import getConfig, resetConfig, of, parse, errors
from rationals.config import RationalsConfig
from rationals._result import Result
from rationals.common import getLogger


def test_defaults():
    config = getConfig()
    assert config.maxDenominator == 2**128
    assert config.tolerance == '1e-36'
    assert config.reprStyle == 'fraction'
    assert config.reprApproximatePrefix == '~'
    assert config.reprFloatDigits == 8
    assert config is getConfig()


def test_validation():
    config = getConfig()
    with pytest.raises(ValidationError):
        config.reprStyle = 'foo'
    with pytest.raises(ValidationError):
        config.maxDenominator = 0
    with pytest.raises(ValidationError):
        config.tolerance = '-1/2'
    with pytest.raises(ValidationError):
        config.tolerance = 'abc'
    with pytest.raises(ValidationError):
        config.reprFloatDigits = 100
    with pytest.raises(ValueError):
        config.unknownKey = 1
    assert config.reprStyle == 'fraction'


def test_tolerance_value():
    config = getConfig()
    config.tolerance = '1/1000'
    assert config.toleranceValue() == of(1, 1000)
    assert of(1, 2000).isNearZero()


def test_reset():
    config = getConfig()
    config.reprStyle = 'constructor'
    config.maxDenominator = 10
    resetConfig()
    assert config.reprStyle == 'fraction'
    assert config.maxDenominator == 2**128


def test_independent_config():
    other = RationalsConfig(reprStyle='float')
    assert other.reprStyle == 'float'
    assert getConfig().reprStyle == 'fraction'


def test_result():
    ok = Result.Ok(of(1, 2))
    assert ok and ok.ok and not ok.failed
    assert ok.value == of(1, 2)
    assert ok.valueOr(None) == of(1, 2)
    assert repr(ok) == 'Ok(value=1/2)'
    fail = Result.Fail('bad input')
    assert not fail
    assert fail.info == 'bad input'
    assert repr(fail) == 'Fail(info="bad input")'
    with pytest.raises(ValueError):
        fail.value
    with pytest.raises(TypeError):
        Result.Fail(None)


def test_parse_never_raises():
    for text in ('1/0', '', 'x', '1.2.3', None):
        result = parse(text)
        assert result.failed
        assert result.info


def test_error_hierarchy():
    for cls in (errors.DivisionByZero, errors.ParseError, errors.InvalidValue, errors.Overflow,
                errors.InexactConversion, errors.EmptyInput):
        assert issubclass(cls, errors.RationalError)
    assert issubclass(errors.DivisionByZero, ZeroDivisionError)
    assert issubclass(errors.Overflow, OverflowError)
    assert issubclass(errors.ParseError, ValueError)


def test_errors_are_chained():
    with pytest.raises(errors.ParseError) as excinfo:
        of('1/x')
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_logger():
    logger = getLogger('rationals')
    assert logger is logging.getLogger('rationals')
    assert getLogger('rationals') is logger
    assert not logger.propagate
    assert logger.handlers
