"""Access domain services."""

from .access_gate import AccessGate
from .engine import AccessDecisionEngine
from .matcher import RouteMatcher

__all__ = [
    "AccessDecisionEngine",
    "AccessGate",
    "RouteMatcher",
]
