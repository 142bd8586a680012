"""Tests for middleware path matcher patterns."""

import pytest

from hrgate.application.api.path_matcher import PathMatcher, compile_pattern
from hrgate.config import AccessConfig
from hrgate.domain.shared.error import ConfigurationError


@pytest.fixture
def default_matcher() -> PathMatcher:
    return PathMatcher.from_patterns(AccessConfig().matcher)


class TestDefaultMatcher:
    @pytest.mark.parametrize(
        "path",
        ["/hr", "/hr/", "/hr/payroll", "/ceo/reports/2024", "/admin/users", "/employee/profile"],
    )
    def test_role_areas_matched(self, default_matcher: PathMatcher, path: str) -> None:
        assert default_matcher.matches(path)

    @pytest.mark.parametrize(
        "path",
        ["/", "/login", "/hrmodules", "/reports", "/team", "/employees", "/api/hr"],
    )
    def test_other_paths_not_matched(self, default_matcher: PathMatcher, path: str) -> None:
        assert not default_matcher.matches(path)


class TestCompilePattern:
    def test_single_segment_param(self) -> None:
        regex = compile_pattern("/hr/employee/:id")
        assert regex.fullmatch("/hr/employee/42")
        assert not regex.fullmatch("/hr/employee")
        assert not regex.fullmatch("/hr/employee/42/edit")

    def test_optional_param(self) -> None:
        regex = compile_pattern("/blogs/:id?")
        assert regex.fullmatch("/blogs")
        assert regex.fullmatch("/blogs/7")
        assert not regex.fullmatch("/blogs/7/comments")

    def test_one_or_more(self) -> None:
        regex = compile_pattern("/docs/:path+")
        assert not regex.fullmatch("/docs")
        assert regex.fullmatch("/docs/a/b")

    def test_literal_segments_escaped(self) -> None:
        regex = compile_pattern("/admin/shift&ot")
        assert regex.fullmatch("/admin/shift&ot")
        assert not regex.fullmatch("/admin/shiftXot/extra")

    def test_root(self) -> None:
        assert compile_pattern("/").fullmatch("/")

    @pytest.mark.parametrize("pattern", ["", "hr/:path*", "/hr/:", "/hr/a:b"])
    def test_malformed_rejected(self, pattern: str) -> None:
        with pytest.raises(ConfigurationError):
            compile_pattern(pattern)

    def test_empty_pattern_list_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="never run"):
            PathMatcher.from_patterns([])
