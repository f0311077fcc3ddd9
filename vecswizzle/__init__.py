"""GLSL-style swizzling N-dimensional vectors.

    >>> from vecswizzle import vec3
    >>> v = vec3(1, 2, 3)
    >>> v.zyx.to_tuple()
    (3.0, 2.0, 1.0)
"""

__version__ = "0.1.0"

from .core.config import (
    Settings,
    configure,
    get_settings,
    names_for_arity,
    reset_settings,
)
from .core.errors import (
    ArityMismatch,
    DimensionMismatch,
    InvalidSwizzle,
    UnknownComponent,
    VectorError,
)
from .core.factory import make_vector, vec2, vec3, vec4, vec_n
from .core.math_compat import HAS_MATHUTILS, from_mathutils, to_mathutils
from .core.packing import pack_vectors, unpack_vectors
from .core.swizzle import is_valid_pattern, iter_patterns, resolve_indices
from .core.vector import FixedVector
from .core.view import SwizzleView, wrap

__all__ = [
    "ArityMismatch",
    "DimensionMismatch",
    "FixedVector",
    "HAS_MATHUTILS",
    "InvalidSwizzle",
    "Settings",
    "SwizzleView",
    "UnknownComponent",
    "VectorError",
    "configure",
    "from_mathutils",
    "get_settings",
    "is_valid_pattern",
    "iter_patterns",
    "make_vector",
    "names_for_arity",
    "pack_vectors",
    "reset_settings",
    "resolve_indices",
    "to_mathutils",
    "unpack_vectors",
    "vec2",
    "vec3",
    "vec4",
    "vec_n",
    "wrap",
]
