"""Middleware path matcher: which requests the gate runs for at all.

Patterns use the ``/segment/:param*`` form:

- ``:name``   exactly one segment
- ``:name?``  zero or one segment
- ``:name+``  one or more segments
- ``:name*``  zero or more segments

so ``/hr/:path*`` matches ``/hr``, ``/hr/`` and ``/hr/payroll/2024`` but not
``/hrmodules``.
"""

import re
from dataclasses import dataclass

from hrgate.domain.shared.error import ConfigurationError

_PARAM = re.compile(r"^:(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?P<modifier>[*+?]?)$")

_SEGMENT = "/[^/]+"
_MODIFIERS = {
    "": _SEGMENT,
    "?": f"(?:{_SEGMENT})?",
    "+": f"(?:{_SEGMENT})+",
    "*": f"(?:{_SEGMENT})*",
}


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a matcher pattern to a regex for full-path matching.

    Raises ConfigurationError for empty or malformed patterns.
    """
    if not pattern or not pattern.startswith("/"):
        raise ConfigurationError(f"Matcher pattern {pattern!r} must start with '/'")

    parts: list[str] = []
    for segment in pattern.strip("/").split("/"):
        if not segment:
            continue
        param = _PARAM.match(segment)
        if param is not None:
            parts.append(_MODIFIERS[param.group("modifier")])
        elif ":" in segment:
            raise ConfigurationError(
                f"Matcher pattern {pattern!r} has malformed segment {segment!r}"
            )
        else:
            parts.append("/" + re.escape(segment))

    return re.compile("".join(parts) + "/?")


@dataclass(frozen=True)
class PathMatcher:
    """Compiled set of patterns the gate is invoked for."""

    patterns: tuple[str, ...]
    compiled: tuple[re.Pattern[str], ...]

    @classmethod
    def from_patterns(cls, patterns: list[str]) -> "PathMatcher":
        if not patterns:
            raise ConfigurationError("Matcher pattern list is empty; the gate would never run")
        return cls(
            patterns=tuple(patterns),
            compiled=tuple(compile_pattern(p) for p in patterns),
        )

    def matches(self, path: str) -> bool:
        return any(regex.fullmatch(path) for regex in self.compiled)
