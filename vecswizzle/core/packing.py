"""Interleaved binary packing of vector arrays.

Vectors are written back to back, one struct field per component, in the
layout vertex attribute buffers use (e.g. `<f` gives 12-byte xyz records).
"""

from __future__ import annotations

import struct
from typing import Iterable, List, Optional, Sequence

from .config import get_settings, names_for_arity, split_component_format
from .errors import ArityMismatch, DimensionMismatch
from .vector import FixedVector


def _record_format(fmt: Optional[str], arity: int) -> str:
    fmt = get_settings().component_format if fmt is None else str(fmt)
    order, code = split_component_format(fmt)
    return f"{order}{int(arity)}{code}"


def pack_vectors(vectors: Iterable, fmt: Optional[str] = None) -> bytes:
    out = bytearray()
    arity = None
    record = None
    for vec in vectors:
        comps = vec.components
        if arity is None:
            arity = len(comps)
            record = _record_format(fmt, arity)
        elif len(comps) != arity:
            raise DimensionMismatch(
                f"cannot pack {len(comps)}-component vector with {arity}-component ones"
            )
        out += struct.pack(record, *comps)
    return bytes(out)


def unpack_vectors(
    blob: bytes,
    arity: int,
    names: Optional[Sequence[str]] = None,
    fmt: Optional[str] = None,
) -> List[FixedVector]:
    if names is None:
        names = names_for_arity(arity)
    elif len(names) != int(arity):
        raise ArityMismatch(f"{len(names)} names for arity {arity}")
    record = _record_format(fmt, arity)
    size = struct.calcsize(record)
    b = memoryview(blob)
    if len(b) % size != 0:
        raise ArityMismatch(
            f"blob of {len(b)} bytes is not a whole number of {size}-byte records"
        )
    return [
        FixedVector(list(names), list(values))
        for values in struct.iter_unpack(record, b)
    ]
