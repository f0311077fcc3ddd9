"""Swizzle pattern resolution.

A swizzle pattern is a string of 1..N component names drawn from a vector's
name set, e.g. `"zyx"` or `"xxy"` for names `"xyz"`. Validity is a membership
test per character; order and repetition are free.
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterator, List, Optional, Sequence

from .errors import InvalidSwizzle

logger = logging.getLogger(__name__)


def is_valid_pattern(valid_names: Sequence[str], pattern) -> bool:
    if not isinstance(pattern, str):
        return False
    if not 1 <= len(pattern) <= len(valid_names):
        return False
    return all(c in valid_names for c in pattern)


def resolve_indices(valid_names: Sequence[str], pattern: str) -> List[int]:
    """Return the index into `valid_names` of each character of `pattern`."""
    if not is_valid_pattern(valid_names, pattern):
        logger.debug("rejected swizzle %r for names %r", pattern, list(valid_names))
        raise InvalidSwizzle(pattern, valid_names)
    names = list(valid_names)
    return [names.index(c) for c in pattern]


def iter_patterns(
    valid_names: Sequence[str],
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> Iterator[str]:
    """Yield every valid pattern, shortest first.

    There are N**k patterns of length k, so only enumerate small name sets.
    """
    names = list(valid_names)
    top = len(names) if max_length is None else min(int(max_length), len(names))
    for k in range(max(1, int(min_length)), top + 1):
        for combo in itertools.product(names, repeat=k):
            yield "".join(combo)
