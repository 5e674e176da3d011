from __future__ import annotations
from typing import Generic, TypeVar


_T = TypeVar('_T')


__all__ = ('Result',)


class Result(Generic[_T]):
    """
    Outcome of :func:`rationals.parse`: the parsed value, or why parsing failed

    Truthy if ok::

        if r := parse("4/5"):
            r.value                            # 4/5
        else:
            r.info                             # the error message
    """

    __slots__ = ('ok', '_value', 'info')

    def __init__(self, ok: bool, value: _T | None = None, info: str = ''):
        self.ok: bool = ok
        self._value: _T | None = value
        self.info: str = info

    @property
    def value(self) -> _T:
        """
        The value of a successful result

        Raises ValueError if the operation failed
        """
        if not self.ok:
            raise ValueError(f"Cannot access the value of a failed result ({self.info})")
        assert self._value is not None
        return self._value

    def valueOr(self, default):
        """The value if ok, default otherwise"""
        return self._value if self.ok else default

    def __bool__(self) -> bool:
        return self.ok

    @property
    def failed(self) -> bool:
        """True if operation failed"""
        return not self.ok

    def __repr__(self):
        if self.ok:
            return f"Ok(value={self._value!r})"
        else:
            return f'Fail(info="{self.info}")'

    @classmethod
    def Fail(cls, info: str) -> Result:
        """Create a Result object for a failed operation."""
        if not isinstance(info, str):
            raise TypeError(f"The info parameter should be a str, got {info}")
        return cls(False, value=None, info=info)

    @classmethod
    def Ok(cls, value: _T) -> Result[_T]:
        """Create a Result object for a successful operation."""
        return cls(True, value=value)
