"""Access decisions produced by the gate."""

from dataclasses import dataclass
from enum import StrEnum


class Outcome(StrEnum):
    """The three terminal outcomes of an access check."""

    ALLOW = "allow"
    REDIRECT_TO_LOGIN = "redirect_to_login"
    REDIRECT_TO_UNAUTHORIZED = "redirect_to_unauthorized"


@dataclass(frozen=True)
class AccessDecision:
    """Outcome plus the path to redirect to (None on ALLOW)."""

    outcome: Outcome
    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is Outcome.ALLOW


ALLOW = AccessDecision(outcome=Outcome.ALLOW)
