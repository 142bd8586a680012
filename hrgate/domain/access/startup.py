"""Startup validation for the static access tables."""

import logging

from hrgate.domain.access.model.gate import AtLeast
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.access.service.matcher import RouteMatcher
from hrgate.domain.auth.model.role import Role
from hrgate.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)


def _check_path(label: str, path: str) -> list[str]:
    if not path:
        return [f"{label} is empty"]
    if not path.startswith("/"):
        return [f"{label} {path!r} must start with '/'"]
    return []


def _check_hierarchy(policy: AccessPolicy) -> list[str]:
    violations: list[str] = []
    ranks = policy.hierarchy.ranks

    if Role.UNRECOGNIZED in ranks:
        violations.append("role hierarchy must not rank the unrecognized role")

    missing = [r.value for r in Role.known() if r not in ranks]
    if missing:
        violations.append(f"role hierarchy has no rank for: {', '.join(missing)}")

    seen: dict[int, Role] = {}
    for role, rank in ranks.items():
        if rank <= 0:
            violations.append(f"rank of {role.value} must be positive, got {rank}")
        if rank in seen:
            violations.append(
                f"roles {seen[rank].value} and {role.value} share rank {rank}"
            )
        seen.setdefault(rank, role)

    return violations


def _check_routes(policy: AccessPolicy) -> list[str]:
    violations: list[str] = []

    if len(policy.routes) == 0:
        violations.append("protected route table is empty")

    for route in policy.routes:
        if route.owner is Role.UNRECOGNIZED:
            violations.append("protected routes must not be owned by the unrecognized role")
        if route.owner not in policy.hierarchy.ranks:
            violations.append(f"route owner {route.owner.value} has no rank")
        if not route.prefixes:
            violations.append(f"routes owned by {route.owner.value} declare no prefixes")
        for prefix in route.prefixes:
            violations.extend(_check_path(f"prefix of {route.owner.value}", prefix))

    return violations


def _check_redirect_targets(policy: AccessPolicy) -> list[str]:
    violations: list[str] = []
    matcher = RouteMatcher(_policy=policy)

    for label, path in (
        ("login path", policy.login_path),
        ("unauthorized path", policy.unauthorized_path),
    ):
        path_violations = _check_path(label, path)
        if path_violations:
            violations.extend(path_violations)
            continue
        gate = matcher.match(path)
        if isinstance(gate, AtLeast):
            violations.append(
                f"{label} {path!r} is protected by {gate.role.value}; redirects would loop"
            )

    for prefix in policy.public.prefixes:
        violations.extend(_check_path("public prefix", prefix))
    for path in policy.public.exact:
        violations.extend(_check_path("public path", path))

    return violations


def validate_access_policy(policy: AccessPolicy) -> None:
    """Check the access tables for contradictions.

    Raises ConfigurationError listing every violation found.
    """
    violations = [
        *_check_hierarchy(policy),
        *_check_routes(policy),
        *_check_redirect_targets(policy),
    ]

    if violations:
        raise ConfigurationError(
            f"Access policy validation failed with {len(violations)} violation(s):\n"
            + "\n".join(f"  - {v}" for v in violations),
            violations=violations,
        )

    logger.info(
        "Access policy validated: %d protected area(s), %d role(s)",
        len(policy.routes),
        len(policy.hierarchy.ranks),
    )
