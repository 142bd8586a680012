"""Route-level gates: public() and at_least(Role)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hrgate.domain.auth.model.role import Role


class Gate:
    """Base for the protection a path falls under.

    The route matcher returns one of the subclasses for every path.
    """


@dataclass(frozen=True)
class Public(Gate):
    """No credentials required."""


@dataclass(frozen=True)
class AtLeast(Gate):
    """Path owned by ``role``; callers need that role or a higher-ranked one."""

    role: "Role"


_PUBLIC = Public()


def public() -> Public:
    """Mark a path as unprotected."""
    return _PUBLIC


def at_least(role: "Role") -> AtLeast:
    """Mark a path as owned by the given role."""
    return AtLeast(role=role)
