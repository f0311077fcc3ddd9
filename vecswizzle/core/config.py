"""Library-wide settings.

Holds the default component-name sets, comparison tolerances and the binary
component format. Settings are immutable; `configure` installs a new object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from .errors import ArityMismatch

logger = logging.getLogger(__name__)

# IEEE-754 half, single and double; components are floats
FLOAT_CODES = ("e", "f", "d")
BYTE_ORDERS = ("<", ">", "=", "!", "@")


def _default_name_sets() -> Mapping[int, str]:
    return {2: "xy", 3: "xyz", 4: "xyzw"}


def split_component_format(fmt: str):
    """Return `(byte_order, code)` for a single-float struct format."""
    fmt = str(fmt)
    if fmt[:1] in BYTE_ORDERS:
        order, code = fmt[0], fmt[1:]
    else:
        order, code = "<", fmt
    if code not in FLOAT_CODES:
        raise ValueError(
            f"component format must be one float field ({'/'.join(FLOAT_CODES)}): {fmt!r}"
        )
    return order, code


@dataclass(frozen=True)
class Settings:
    name_sets: Mapping[int, str] = field(default_factory=_default_name_sets)
    generic_names: str = "xyzwabcdefghijklmnopqrstuv"
    rel_tol: float = 1e-9
    abs_tol: float = 1e-12
    component_format: str = "<f"

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "name_sets",
            MappingProxyType({int(k): str(v) for k, v in dict(self.name_sets).items()}),
        )

    def names_for_arity(self, arity: int) -> str:
        n = int(arity)
        if n < 2:
            raise ArityMismatch(f"vectors need at least 2 components, got {n}")
        names = self.name_sets.get(n)
        if names is not None:
            return names
        if n > len(self.generic_names):
            raise ArityMismatch(
                f"no default names for arity {n} (max {len(self.generic_names)})"
            )
        return self.generic_names[:n]


def _check_names(names: str, what: str) -> None:
    if not isinstance(names, str) or not names:
        raise ValueError(f"{what} must be a non-empty string")
    if len(set(names)) != len(names):
        raise ValueError(f"{what} has duplicate component names: {names!r}")


def _validate(settings: Settings) -> Settings:
    for arity, names in settings.name_sets.items():
        _check_names(names, f"name set for arity {arity}")
        if len(names) != int(arity):
            raise ValueError(f"name set {names!r} does not have {arity} names")
    _check_names(settings.generic_names, "generic_names")
    if settings.rel_tol < 0 or settings.abs_tol < 0:
        raise ValueError("tolerances must be >= 0")
    split_component_format(settings.component_format)
    return settings


_current = Settings()


def get_settings() -> Settings:
    return _current


def configure(**overrides: Any) -> Settings:
    """Install settings with `overrides` applied to the current ones."""
    global _current
    new = _validate(replace(_current, **overrides))
    logger.debug("settings changed: %s", sorted(overrides))
    _current = new
    return new


def reset_settings() -> Settings:
    global _current
    _current = Settings()
    return _current


def names_for_arity(arity: int) -> str:
    return _current.names_for_arity(arity)
