"""Caller credential — what the request presents, before any decision."""

from dataclasses import dataclass

from hrgate.domain.auth.model.role import Role


@dataclass(frozen=True)
class Credential:
    """Per-request snapshot of the caller's identity markers.

    Token presence and role claim are independent: a token without a role
    claim (or the reverse) is a legitimate state.
    """

    has_token: bool
    role: Role | None = None  # None = no claim; Role.UNRECOGNIZED = unknown claim

    @property
    def has_role_claim(self) -> bool:
        return self.role is not None


ANONYMOUS = Credential(has_token=False)
"""Credential of a caller that presented nothing."""
