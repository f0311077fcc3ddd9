"""Constructors that hand out swizzle-enabled vectors.

`vec2`/`vec3`/`vec4` name their components `xy`/`xyz`/`xyzw` (or whatever the
current settings say); `vec_n` takes explicit names.
"""

from __future__ import annotations

from typing import Sequence, Union

from .config import names_for_arity
from .errors import ArityMismatch
from .vector import FixedVector, Number
from .view import SwizzleView


def make_vector(arity: int, values: Union[Number, Sequence[Number]]) -> SwizzleView:
    return SwizzleView(FixedVector.construct(names_for_arity(arity), values))


def vec2(*body: Number) -> SwizzleView:
    return make_vector(2, body)


def vec3(*body: Number) -> SwizzleView:
    return make_vector(3, body)


def vec4(*body: Number) -> SwizzleView:
    return make_vector(4, body)


def vec_n(names: Sequence[str], *body: Number) -> SwizzleView:
    """Generic N-component vector, e.g. `vec_n("rgba", 1, 0, 0, 1)`."""
    if not body:
        raise ArityMismatch(f"expected 1 or {len(names)} values, got 0")
    return SwizzleView(FixedVector.construct(names, body))
