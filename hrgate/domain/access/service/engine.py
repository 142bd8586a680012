"""Access decision engine — compares a gate with a caller credential."""

from hrgate.domain.access.model.decision import ALLOW, AccessDecision, Outcome
from hrgate.domain.access.model.gate import AtLeast, Gate, Public
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.auth.model.credential import Credential
from hrgate.domain.shared.service import Service


class AccessDecisionEngine(Service):
    """Turns (gate, credential) into an AccessDecision.

    Total over its inputs: every combination, including unrecognized role
    claims, maps to one of the three outcomes. Anything that is not a
    recognized gate resolves to the most restrictive outcome.
    """

    _policy: AccessPolicy

    def decide(self, gate: Gate, credential: Credential) -> AccessDecision:
        if isinstance(gate, Public):
            return ALLOW
        if not isinstance(gate, AtLeast):
            return self._unauthorized()

        if not credential.has_token:
            return AccessDecision(
                outcome=Outcome.REDIRECT_TO_LOGIN,
                redirect_to=self._policy.login_path,
            )

        if not credential.has_role_claim:
            return self._unauthorized()

        claimed = credential.role

        # Exact owner skips the rank lookup
        if claimed is gate.role:
            return ALLOW

        if not self._policy.hierarchy.satisfies(claimed, gate.role):
            return self._unauthorized()

        return ALLOW

    def _unauthorized(self) -> AccessDecision:
        return AccessDecision(
            outcome=Outcome.REDIRECT_TO_UNAUTHORIZED,
            redirect_to=self._policy.unauthorized_path,
        )
