"""Interop with Blender's `mathutils.Vector`.

Blender's Python ships `mathutils`; plain CPython only has it when the
`mathutils` extra is installed.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .config import names_for_arity
from .vector import FixedVector
from .view import SwizzleView

try:
    import mathutils

    HAS_MATHUTILS = True
except ModuleNotFoundError:
    mathutils = None
    HAS_MATHUTILS = False


def _require_mathutils() -> None:
    if not HAS_MATHUTILS:
        raise RuntimeError(
            "mathutils is not available; install vecswizzle[mathutils] or run inside Blender"
        )


def to_mathutils(vector):
    _require_mathutils()
    return mathutils.Vector(tuple(vector.components))


def from_mathutils(mvec, names: Optional[Sequence[str]] = None) -> SwizzleView:
    _require_mathutils()
    values = [float(v) for v in mvec]
    if names is None:
        names = names_for_arity(len(values))
    return SwizzleView(FixedVector.construct(names, values))
