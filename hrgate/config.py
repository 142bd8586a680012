import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from hrgate.domain.access.model.hierarchy import DEFAULT_RANKS, RoleHierarchy
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.access.model.route import (
    DEFAULT_ROUTES,
    ProtectedRoute,
    PublicRoutes,
    RouteTable,
)
from hrgate.domain.access.startup import validate_access_policy
from hrgate.domain.auth.model.role import Role


# =============================================================================
# Access Configuration
# =============================================================================


class ProtectedRouteConfig(BaseModel):
    """One protected area: the owning role and its path prefixes."""

    owner: Role
    prefixes: list[str]


class PublicRoutesConfig(BaseModel):
    """Paths that bypass the gate."""

    exact: list[str] = ["/"]  # Matched against the whole path (home page)
    prefixes: list[str] = ["/login", "/signup", "/_next", "/api"]


def _default_protected_routes() -> list[ProtectedRouteConfig]:
    return [
        ProtectedRouteConfig(owner=route.owner, prefixes=list(route.prefixes))
        for route in DEFAULT_ROUTES
    ]


class AccessConfig(BaseModel):
    """Access gate configuration (nested in Config, uses env_nested_delimiter).

    ``protected_routes`` is ordered: the first entry with a matching prefix
    owns the path.
    """

    protected_routes: list[ProtectedRouteConfig] = Field(
        default_factory=_default_protected_routes
    )
    role_hierarchy: dict[Role, int] = Field(default_factory=lambda: dict(DEFAULT_RANKS))
    public_routes: PublicRoutesConfig = PublicRoutesConfig()
    login_path: str = "/login"
    unauthorized_path: str = "/unauthorized"
    # Paths the middleware runs the gate for (Next-style patterns)
    matcher: list[str] = [
        "/ceo/:path*",
        "/manager/:path*",
        "/hr/:path*",
        "/employee/:path*",
        "/admin/:path*",
    ]
    redirect_status: int = 307


class CredentialsConfig(BaseModel):
    """Where the caller's identity markers are read from.

    Cookies are read first; headers are the fallback. With ``verify_token``
    the token must be a JWT signed with ``jwt_secret`` and the role claim is
    taken from its ``role`` claim only.
    """

    token_cookie: str = "token"
    role_cookie: str = "role"
    token_header: str = "Authorization"  # "Bearer <token>"
    role_header: str = "X-User-Role"
    verify_token: bool = False
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_audience: str | None = None


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by HRGATE_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("HRGATE_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter)."""

    name: str = "HR Portal Gate"
    version: str = "0.1.0"
    description: str = "Role-based access gate for the HR portal"


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from HRGATE_LOG_FILE env var."""
        return os.environ.get("HRGATE_LOG_FILE")


class Config(BaseSettings):
    server: Server = Server()
    logging: LoggingConfig = LoggingConfig()
    access: AccessConfig = AccessConfig()
    credentials: CredentialsConfig = CredentialsConfig()

    model_config = {
        "env_prefix": "HRGATE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows HRGATE_ACCESS__LOGIN_PATH override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - HRGATE_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def build_access_policy(config: AccessConfig) -> AccessPolicy:
    """Build the immutable access tables and validate them.

    Raises ConfigurationError if the tables contradict each other.
    """
    policy = AccessPolicy(
        routes=RouteTable(
            routes=tuple(
                ProtectedRoute(owner=entry.owner, prefixes=tuple(entry.prefixes))
                for entry in config.protected_routes
            )
        ),
        hierarchy=RoleHierarchy(ranks=dict(config.role_hierarchy)),
        public=PublicRoutes(
            exact=frozenset(config.public_routes.exact),
            prefixes=tuple(config.public_routes.prefixes),
        ),
        login_path=config.login_path,
        unauthorized_path=config.unauthorized_path,
    )
    validate_access_policy(policy)
    return policy


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup, before other modules
    are imported to ensure all loggers pick up the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
