"""Tests for RouteMatcher: public bypass, first-match ownership."""

import pytest

from hrgate.domain.access.model.gate import AtLeast, Public, at_least, public
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.access.model.route import ProtectedRoute, PublicRoutes, RouteTable
from hrgate.domain.access.service.matcher import RouteMatcher
from hrgate.domain.auth.model.role import Role


class TestPublicRoutes:
    @pytest.mark.parametrize(
        "path",
        ["/", "/login", "/login/reset", "/signup", "/_next/static/app.js", "/api/contact"],
    )
    def test_public_paths_are_unprotected(self, route_matcher: RouteMatcher, path: str) -> None:
        assert route_matcher.match(path) == public()

    def test_home_is_exact_not_prefix(self, route_matcher: RouteMatcher) -> None:
        # Every path starts with "/", so home must not act as a prefix
        assert isinstance(route_matcher.match("/hr"), AtLeast)

    def test_public_wins_over_protected(self) -> None:
        policy = AccessPolicy(
            routes=RouteTable(routes=(ProtectedRoute(Role.ADMIN, ("/api",)),)),
            public=PublicRoutes(prefixes=("/api",)),
        )
        assert RouteMatcher(_policy=policy).match("/api/users") == public()


class TestProtectedRoutes:
    @pytest.mark.parametrize(
        ("path", "owner"),
        [
            ("/ceo", Role.CEO),
            ("/ceo/reports", Role.CEO),
            ("/overview", Role.CEO),
            ("/manager/tasks", Role.MANAGER),
            ("/team", Role.MANAGER),
            ("/tasks/123", Role.MANAGER),
            ("/hr/payroll", Role.HR),
            ("/employee/profile/documents", Role.EMPLOYEE),
            ("/admin/users", Role.ADMIN),
        ],
    )
    def test_owner(self, route_matcher: RouteMatcher, path: str, owner: Role) -> None:
        assert route_matcher.match(path) == at_least(owner)

    def test_unlisted_path_is_unprotected(self, route_matcher: RouteMatcher) -> None:
        assert isinstance(route_matcher.match("/careers"), Public)

    def test_prefix_is_literal(self, route_matcher: RouteMatcher) -> None:
        # "/hrmodules" starts with "/hr": literal prefix test, no segment logic
        assert route_matcher.match("/hrmodules") == at_least(Role.HR)

    def test_no_trailing_slash_normalization(self, route_matcher: RouteMatcher) -> None:
        assert route_matcher.match("/admin/") == at_least(Role.ADMIN)


class TestOverlappingPrefixes:
    def test_reports_owned_by_first_declared(self, route_matcher: RouteMatcher) -> None:
        # "/reports" is declared under ceo before manager
        assert route_matcher.match("/reports") == at_least(Role.CEO)
        assert route_matcher.match("/reports/monthly") == at_least(Role.CEO)

    def test_employees_owned_by_ceo(self, route_matcher: RouteMatcher) -> None:
        # "/employees" (ceo) is declared before "/employee" (employee)
        assert route_matcher.match("/employees") == at_least(Role.CEO)
        assert route_matcher.match("/employee/tasks") == at_least(Role.EMPLOYEE)

    def test_reordering_changes_owner(self) -> None:
        policy = AccessPolicy(
            routes=RouteTable(
                routes=(
                    ProtectedRoute(Role.MANAGER, ("/reports",)),
                    ProtectedRoute(Role.CEO, ("/reports",)),
                )
            )
        )
        assert RouteMatcher(_policy=policy).match("/reports") == at_least(Role.MANAGER)
