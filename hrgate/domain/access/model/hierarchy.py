"""Role hierarchy: a fixed ranking of roles by privilege level."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from hrgate.domain.auth.model.role import Role

DEFAULT_RANKS: Mapping[Role, int] = MappingProxyType(
    {
        Role.EMPLOYEE: 1,
        Role.HR: 2,
        Role.MANAGER: 3,
        Role.ADMIN: 4,
        Role.CEO: 5,
    }
)


@dataclass(frozen=True)
class RoleHierarchy:
    """Immutable role → rank table.

    Higher rank means more privileged. Consulted only through numeric
    comparison; ``UNRECOGNIZED`` (or any role missing from the table) has
    no rank and satisfies nothing.
    """

    ranks: Mapping[Role, int] = field(default_factory=lambda: dict(DEFAULT_RANKS))

    def __post_init__(self) -> None:
        object.__setattr__(self, "ranks", MappingProxyType(dict(self.ranks)))

    def rank(self, role: Role) -> int | None:
        """Rank of ``role``, or None when it has none."""
        return self.ranks.get(role)

    def satisfies(self, claimed: Role, required: Role) -> bool:
        """True if ``claimed`` ranks at least as high as ``required``."""
        claimed_rank = self.rank(claimed)
        required_rank = self.rank(required)
        if claimed_rank is None or required_rank is None:
            return False
        return claimed_rank >= required_rank

    def ordered(self) -> list[tuple[Role, int]]:
        """Roles sorted from least to most privileged."""
        return sorted(self.ranks.items(), key=lambda item: item[1])
