"""Protected and public route tables."""

from dataclasses import dataclass

from hrgate.domain.auth.model.role import Role


@dataclass(frozen=True)
class ProtectedRoute:
    """An area of the portal owned by one role.

    ``prefixes`` are literal path prefixes, each starting with ``/``.
    """

    owner: Role
    prefixes: tuple[str, ...]

    def matches(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.prefixes)


@dataclass(frozen=True)
class RouteTable:
    """Ordered protected routes. Declaration order decides overlapping prefixes."""

    routes: tuple[ProtectedRoute, ...]

    def __iter__(self):
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)


@dataclass(frozen=True)
class PublicRoutes:
    """Paths that bypass the gate regardless of credentials.

    ``exact`` paths must match the whole request path; ``prefixes`` use a
    literal prefix test. Home (``/``) is exact, otherwise every path would
    start with it.
    """

    exact: frozenset[str] = frozenset({"/"})
    prefixes: tuple[str, ...] = ("/login", "/signup", "/_next", "/api")

    def contains(self, path: str) -> bool:
        if path in self.exact:
            return True
        return any(path.startswith(prefix) for prefix in self.prefixes)


DEFAULT_ROUTES = RouteTable(
    routes=(
        ProtectedRoute(Role.CEO, ("/ceo", "/overview", "/reports", "/employees")),
        ProtectedRoute(Role.MANAGER, ("/manager", "/team", "/tasks", "/reports")),
        ProtectedRoute(
            Role.HR,
            ("/hr", "/hr/employees", "/hr/leaves", "/hr/attendance", "/hr/payroll", "/hr/tasks"),
        ),
        ProtectedRoute(
            Role.EMPLOYEE,
            (
                "/employee",
                "/employee/dashboard",
                "/employee/tasks",
                "/employee/attendance",
                "/employee/leaves",
                "/employee/payroll",
                "/employee/profile",
            ),
        ),
        ProtectedRoute(Role.ADMIN, ("/admin", "/admin/users", "/admin/settings", "/admin/logs")),
    )
)
"""Portal areas in declaration order. ``/reports`` belongs to CEO (declared first)."""
