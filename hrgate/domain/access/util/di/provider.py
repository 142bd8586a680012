"""DI provider for the access domain."""

from dishka import Provider, Scope, from_context, provide

from hrgate.config import Config, build_access_policy
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.access.service.access_gate import AccessGate
from hrgate.domain.access.service.engine import AccessDecisionEngine
from hrgate.domain.access.service.matcher import RouteMatcher


class AccessProvider(Provider):
    """DI provider for the access tables and gate services.

    Everything is application-scoped: built once at startup, shared by all
    requests.
    """

    config = from_context(provides=Config, scope=Scope.APP)

    access_gate = provide(AccessGate, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_access_policy(self, config: Config) -> AccessPolicy:
        return build_access_policy(config.access)

    @provide(scope=Scope.APP)
    def get_route_matcher(self, policy: AccessPolicy) -> RouteMatcher:
        return RouteMatcher(_policy=policy)

    @provide(scope=Scope.APP)
    def get_decision_engine(self, policy: AccessPolicy) -> AccessDecisionEngine:
        return AccessDecisionEngine(_policy=policy)
