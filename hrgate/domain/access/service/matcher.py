"""Route matcher — which gate, if any, protects a path."""

from hrgate.domain.access.model.gate import Gate, at_least, public
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.shared.service import Service


class RouteMatcher(Service):
    """Maps a request path to ``Public`` or ``AtLeast(owner)``.

    Public routes are checked first. Protected routes are scanned in
    declaration order and the first matching entry wins.
    """

    _policy: AccessPolicy

    def match(self, path: str) -> Gate:
        if self._policy.public.contains(path):
            return public()

        for route in self._policy.routes:
            if route.matches(path):
                return at_least(route.owner)

        return public()
