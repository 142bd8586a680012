"""Global test fixtures."""

import os

import pytest

from hrgate.config import AccessConfig, build_access_policy
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.access.service.access_gate import AccessGate
from hrgate.domain.access.service.engine import AccessDecisionEngine
from hrgate.domain.access.service.matcher import RouteMatcher
from hrgate.infrastructure.auth.credentials import CookieCredentialExtractor

# Keep the developer's environment out of Config() in tests.
# This must happen at module load time, not in a fixture
for _name in [n for n in os.environ if n.startswith("HRGATE_")]:
    del os.environ[_name]
os.environ.setdefault("LOGFIRE_SEND_TO_LOGFIRE", "false")


@pytest.fixture
def policy() -> AccessPolicy:
    """Access tables as shipped by default."""
    return build_access_policy(AccessConfig())


@pytest.fixture
def route_matcher(policy: AccessPolicy) -> RouteMatcher:
    return RouteMatcher(_policy=policy)


@pytest.fixture
def engine(policy: AccessPolicy) -> AccessDecisionEngine:
    return AccessDecisionEngine(_policy=policy)


@pytest.fixture
def gate(route_matcher: RouteMatcher, engine: AccessDecisionEngine) -> AccessGate:
    return AccessGate(
        _matcher=route_matcher,
        _extractor=CookieCredentialExtractor(),
        _engine=engine,
    )
