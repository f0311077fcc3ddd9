"""Attribute-level swizzle access in front of a `FixedVector`.

`SwizzleView` forwards every member the wrapped vector declares and reads any
other attribute name as a swizzle pattern over the vector's component names:

    v = wrap(FixedVector.construct("xyz", [1, 2, 3]))
    v.z        -> 3.0
    v.zyx      -> view over (3.0, 2.0, 1.0)
    v.xy = w   -> writes w.x and w.y into v

Writes go straight into the wrapped vector, so every view over the same
vector sees them.
"""

from __future__ import annotations

import logging
import numbers
from typing import Iterator, List, Union

from .config import get_settings
from .errors import InvalidSwizzle, UnknownComponent
from .swizzle import is_valid_pattern, iter_patterns, resolve_indices
from .vector import FixedVector

logger = logging.getLogger(__name__)

# dir() only lists patterns for vectors this small
_DIR_MAX_ARITY = 4

_DATA_FIELDS = ("names", "components")


class SwizzleView:
    __slots__ = ("_vector",)

    def __init__(self, vector: FixedVector) -> None:
        if isinstance(vector, SwizzleView):
            vector = vector.unwrap()
        if not isinstance(vector, FixedVector):
            raise TypeError(f"can only wrap a FixedVector, got {type(vector).__name__}")
        object.__setattr__(self, "_vector", vector)

    def unwrap(self) -> FixedVector:
        return self._vector

    def swizzle_get(self, pattern: str) -> Union[float, "SwizzleView", None]:
        """Gather components named by `pattern`; None if it is not a swizzle."""
        vec = self._vector
        try:
            indices = resolve_indices(vec.names, pattern)
        except InvalidSwizzle:
            return None
        values = [vec.components[i] for i in indices]
        if len(values) == 1:
            return values[0]
        settings = get_settings()
        names = settings.name_sets.get(len(values))
        if names is None:
            names = vec.names[: len(values)]
        return SwizzleView(FixedVector.construct(names, values))

    def swizzle_set(self, pattern: str, value) -> bool:
        """Scatter components of `value` into the positions named by `pattern`.

        Each component is read off `value` under the same name it is written
        to. Nothing is written unless every one of them resolves.
        """
        vec = self._vector
        if not is_valid_pattern(vec.names, pattern):
            logger.debug("swizzle write rejected: %r is not a pattern over %r", pattern, vec.names)
            return False
        getter = getattr(value, "get_component", None)
        if not callable(getter):
            logger.debug("swizzle write rejected: %r is not vector-like", type(value).__name__)
            return False
        updates = []
        for name in pattern:
            try:
                component = getter(name)
            except UnknownComponent:
                logger.debug("swizzle write rejected: source has no component %r", name)
                return False
            if isinstance(component, bool) or not isinstance(component, numbers.Real):
                return False
            updates.append((name, component))
        for name, component in updates:
            vec.set_component(name, component)
        return True

    def __getattr__(self, key: str):
        if key == "_vector":
            raise AttributeError(key)
        vec = self._vector
        if hasattr(vec, key):
            return getattr(vec, key)
        value = self.swizzle_get(key)
        if value is None:
            raise AttributeError(
                f"{type(self).__name__!r} has no attribute or swizzle {key!r}"
            )
        return value

    def __setattr__(self, key: str, value) -> None:
        if key in SwizzleView.__slots__:
            object.__setattr__(self, key, value)
            return
        vec = self._vector
        if key in _DATA_FIELDS:
            # revalidate both fields together so they stay aligned
            fields = {"names": vec.names, "components": vec.components, key: list(value)}
            checked = FixedVector(**fields)
            vec.names = checked.names
            vec.components = checked.components
            return
        if hasattr(vec, key):
            setattr(vec, key, value)
            return
        if not self.swizzle_set(key, value):
            raise AttributeError(f"cannot assign {type(value).__name__} to swizzle {key!r}")

    def __dir__(self) -> List[str]:
        out = set(object.__dir__(self)) | set(dir(self._vector))
        if len(self._vector.names) <= _DIR_MAX_ARITY:
            out.update(iter_patterns(self._vector.names))
        return sorted(out)

    def __repr__(self) -> str:
        body = ", ".join(repr(v) for v in self._vector.components)
        return f"{type(self).__name__}({''.join(self._vector.names)}: {body})"

    def __len__(self) -> int:
        return len(self._vector)

    def __iter__(self) -> Iterator[float]:
        return iter(self._vector)

    def __getitem__(self, index: int) -> float:
        return self._vector[index]

    def __eq__(self, other) -> bool:
        return self._vector == other

    __hash__ = None

    def __add__(self, other) -> FixedVector:
        return self._vector + other

    def __sub__(self, other) -> FixedVector:
        return self._vector - other

    def __mul__(self, other) -> FixedVector:
        return self._vector * other

    def __rmul__(self, other) -> FixedVector:
        return other * self._vector

    def __truediv__(self, other) -> FixedVector:
        return self._vector / other

    def __neg__(self) -> FixedVector:
        return -self._vector


def wrap(vector: Union[FixedVector, SwizzleView]) -> SwizzleView:
    return SwizzleView(vector)

