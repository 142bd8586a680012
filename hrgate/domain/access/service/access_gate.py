"""AccessGate — per-request entry point of the authorization gate."""

from collections.abc import Mapping

from hrgate.domain.access.model.decision import AccessDecision
from hrgate.domain.access.service.engine import AccessDecisionEngine
from hrgate.domain.access.service.matcher import RouteMatcher
from hrgate.domain.auth.port.credential_extractor import CredentialExtractor
from hrgate.domain.shared.service import Service


class AccessGate(Service):
    """Runs matcher → extractor → engine for one request.

    Pure and synchronous: reads only the injected static tables and the
    request values passed in, so concurrent calls need no coordination.
    """

    _matcher: RouteMatcher
    _extractor: CredentialExtractor
    _engine: AccessDecisionEngine

    def check(
        self,
        path: str,
        cookies: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> AccessDecision:
        gate = self._matcher.match(path)
        credential = self._extractor.extract(cookies, headers)
        return self._engine.decide(gate, credential)
