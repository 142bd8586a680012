"""Access domain models."""

from .decision import ALLOW, AccessDecision, Outcome
from .gate import AtLeast, Gate, Public, at_least, public
from .hierarchy import DEFAULT_RANKS, RoleHierarchy
from .policy import AccessPolicy
from .route import DEFAULT_ROUTES, ProtectedRoute, PublicRoutes, RouteTable

__all__ = [
    "ALLOW",
    "AccessDecision",
    "AccessPolicy",
    "AtLeast",
    "DEFAULT_RANKS",
    "DEFAULT_ROUTES",
    "Gate",
    "Outcome",
    "ProtectedRoute",
    "Public",
    "PublicRoutes",
    "RoleHierarchy",
    "RouteTable",
    "at_least",
    "public",
]
