import pytest

from rationals import resetConfig


@pytest.fixture(autouse=True)
def defaultConfig():
    """Every test starts (and ends) with the default configuration"""
    resetConfig()
    yield
    resetConfig()
