"""Error kinds raised by the vector core.

Each error also derives from the builtin a caller would naturally catch for
the same mistake, so `except ValueError` keeps working.
"""

from __future__ import annotations


class VectorError(Exception):
    pass


class ArityMismatch(VectorError, ValueError):
    """Component count does not fit the vector's declared arity."""


class DimensionMismatch(VectorError, ValueError):
    """Binary operation between vectors of different component counts."""


class UnknownComponent(VectorError, LookupError):
    def __init__(self, name: str, names=()) -> None:
        self.name = name
        self.names = tuple(names)
        super().__init__(f"unknown component {name!r} (valid: {''.join(self.names)})")


class InvalidSwizzle(VectorError, ValueError):
    def __init__(self, pattern, names=()) -> None:
        self.pattern = pattern
        self.names = tuple(names)
        super().__init__(
            f"invalid swizzle {pattern!r} for components {''.join(self.names)!r}"
        )
