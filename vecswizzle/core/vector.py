"""Fixed-length numeric vector with named components.

`FixedVector` is a value type: every arithmetic method returns a new vector
and leaves its operands alone. `set_component` is the only in-place mutation,
and exists for swizzle assignment.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from .config import get_settings
from .errors import ArityMismatch, DimensionMismatch, UnknownComponent

Number = Union[int, float]


def _as_component(v) -> float:
    if isinstance(v, bool) or not isinstance(v, numbers.Real):
        raise TypeError(f"vector components must be real numbers, got {type(v).__name__}")
    return float(v)


def _ieee_div(a: float, b: float) -> float:
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _components_of(other) -> List[float]:
    try:
        return other.components
    except AttributeError:
        raise TypeError(
            f"expected a vector, got {type(other).__name__}"
        ) from None


@dataclass(eq=False)
class FixedVector:
    names: List[str]
    components: List[float]

    def __post_init__(self) -> None:
        self.names = [str(n) for n in self.names]
        self.components = [_as_component(v) for v in self.components]
        if len(self.names) < 2:
            raise ArityMismatch(
                f"vectors need at least 2 components, got {len(self.names)}"
            )
        if len(self.components) != len(self.names):
            raise ArityMismatch(
                f"{len(self.components)} components for {len(self.names)} names"
            )
        for n in self.names:
            if len(n) != 1:
                raise ValueError(f"component names must be single characters: {n!r}")
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"duplicate component names: {''.join(self.names)!r}")

    @classmethod
    def construct(
        cls, names: Sequence[str], body: Union[Number, Sequence[Number]]
    ) -> "FixedVector":
        """Build a vector from one broadcast value or exactly one value per name."""
        names = list(names)
        if isinstance(body, numbers.Number):
            values = [body]
        else:
            values = list(body)
        if len(values) == 1:
            values = values * len(names)
        elif len(values) != len(names):
            raise ArityMismatch(
                f"expected 1 or {len(names)} values, got {len(values)}"
            )
        return cls(names, values)

    def clone(self) -> "FixedVector":
        return FixedVector(list(self.names), list(self.components))

    def get_swizzles(self) -> Tuple[str, ...]:
        return tuple(self.names)

    def _index(self, name: str) -> int:
        for i, n in enumerate(self.names):
            if n == name:
                return i
        raise UnknownComponent(name, self.names)

    def get_component(self, name: str) -> float:
        return self.components[self._index(name)]

    def set_component(self, name: str, value: Number) -> None:
        self.components[self._index(name)] = _as_component(value)

    def _element_wise(
        self, other, op: Callable[[float, float], float]
    ) -> "FixedVector":
        theirs = _components_of(other)
        if len(theirs) != len(self.components):
            raise DimensionMismatch(
                f"{len(self.components)}-component vector vs {len(theirs)}-component vector"
            )
        out = self.clone()
        out.components = [op(a, b) for a, b in zip(self.components, theirs)]
        return out

    def add(self, other) -> "FixedVector":
        return self._element_wise(other, lambda a, b: a + b)

    def subtract(self, other) -> "FixedVector":
        return self._element_wise(other, lambda a, b: a - b)

    def multiply(self, other) -> "FixedVector":
        return self._element_wise(other, lambda a, b: a * b)

    def divide(self, other) -> "FixedVector":
        return self._element_wise(other, _ieee_div)

    def scalar(self, k: Number) -> "FixedVector":
        return self.multiply(FixedVector.construct(self.names, _as_component(k)))

    def lerp(self, other, t: Number) -> "FixedVector":
        # t only selects the clamped ends
        t = float(t)

        def pick(a: float, b: float) -> float:
            if t > 1:
                return b
            if t < 0:
                return a
            return a + (a + b) / 2

        return self._element_wise(other, pick)

    def dot(self, other) -> float:
        return sum(self.multiply(other).components)

    def cross(self, other) -> Optional["FixedVector"]:
        """Cross product, or None unless this vector has exactly 3 components."""
        if len(self.components) != 3:
            return None
        b = _components_of(other)
        if len(b) != 3:
            raise DimensionMismatch(f"cross product of 3-component vector with {len(b)}")
        ax, ay, az = self.components
        bx, by, bz = b
        out = self.clone()
        out.components = [
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        ]
        return out

    def norm(self) -> float:
        return math.sqrt(sum(v * v for v in self.components))

    def magnitude(self) -> float:
        return self.norm()

    def normalize(self) -> "FixedVector":
        return self.scalar(_ieee_div(1.0, self.norm()))

    def projection(self, other) -> "FixedVector":
        factor = _ieee_div(self.dot(other), other.norm() ** 2)
        return other.scalar(factor)

    def angle(self, other) -> float:
        """Angle to `other` in radians; NaN when the cosine is out of domain."""
        cosine = _ieee_div(self.dot(other), self.norm() * other.norm())
        if not -1.0 <= cosine <= 1.0:
            return math.nan
        return math.acos(cosine)

    def is_close(
        self,
        other,
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None,
    ) -> bool:
        settings = get_settings()
        rel = settings.rel_tol if rel_tol is None else float(rel_tol)
        abs_ = settings.abs_tol if abs_tol is None else float(abs_tol)
        theirs = _components_of(other)
        if len(theirs) != len(self.components):
            return False
        return all(
            math.isclose(a, b, rel_tol=rel, abs_tol=abs_)
            for a, b in zip(self.components, theirs)
        )

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __eq__(self, other) -> bool:
        try:
            return list(other.names) == self.names and list(other.components) == self.components
        except AttributeError:
            return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(f"{n}={v!r}" for n, v in zip(self.names, self.components))
        return f"FixedVector({body})"

    def __add__(self, other) -> "FixedVector":
        return self.add(other)

    def __sub__(self, other) -> "FixedVector":
        return self.subtract(other)

    def __mul__(self, other) -> "FixedVector":
        if isinstance(other, numbers.Real):
            return self.scalar(other)
        return self.multiply(other)

    def __rmul__(self, other) -> "FixedVector":
        if isinstance(other, numbers.Real):
            return self.scalar(other)
        return NotImplemented

    def __truediv__(self, other) -> "FixedVector":
        if isinstance(other, numbers.Real):
            return self.divide(FixedVector.construct(self.names, _as_component(other)))
        return self.divide(other)

    def __neg__(self) -> "FixedVector":
        return self.scalar(-1.0)
