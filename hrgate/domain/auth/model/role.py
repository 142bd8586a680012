"""Organizational roles."""

from enum import StrEnum


class Role(StrEnum):
    """Identity classes that own areas of the portal.

    ``UNRECOGNIZED`` stands in for any claimed role string that names none of
    the known roles. It never owns a route and never has a rank.
    """

    EMPLOYEE = "employee"
    HR = "hr"
    MANAGER = "manager"
    ADMIN = "admin"
    CEO = "ceo"
    UNRECOGNIZED = "<unrecognized>"

    @classmethod
    def known(cls) -> tuple["Role", ...]:
        """All roles except ``UNRECOGNIZED``, in declaration order."""
        return tuple(r for r in cls if r is not cls.UNRECOGNIZED)

    @classmethod
    def parse(cls, value: str | None) -> "Role | None":
        """Parse an untrusted role claim.

        Returns None when no claim was presented (missing or empty) and
        ``UNRECOGNIZED`` when the claim does not name a known role.
        Matching is exact and case-sensitive.
        """
        if not value:
            return None
        for role in cls.known():
            if role.value == value:
                return role
        return cls.UNRECOGNIZED
