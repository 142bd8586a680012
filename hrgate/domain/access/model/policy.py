"""AccessPolicy — the full set of static tables the gate decides with."""

from dataclasses import dataclass, field

from hrgate.domain.access.model.hierarchy import RoleHierarchy
from hrgate.domain.access.model.route import PublicRoutes, RouteTable


@dataclass(frozen=True)
class AccessPolicy:
    """Immutable access tables, built and validated once at startup."""

    routes: RouteTable
    hierarchy: RoleHierarchy = field(default_factory=RoleHierarchy)
    public: PublicRoutes = field(default_factory=PublicRoutes)
    login_path: str = "/login"
    unauthorized_path: str = "/unauthorized"
