"""Config and container loading for CLI commands."""

import sys

from dishka import Container
from pydantic import ValidationError

from hrgate.application.di import create_container
from hrgate.cli.console import get_console
from hrgate.config import Config
from hrgate.domain.access.service.access_gate import AccessGate
from hrgate.domain.shared.error import ConfigurationError

CONFIG_ERROR_EXIT = 2
CONFIG_HINT = "Check HRGATE_CONFIG_FILE and HRGATE_* variables"


def load_config() -> Config:
    """Load settings from the environment, exiting on invalid values."""
    try:
        return Config()  # type: ignore[call-arg]
    except ValidationError as e:
        get_console().error(f"Invalid configuration: {e}", hint=CONFIG_HINT)
        sys.exit(CONFIG_ERROR_EXIT)


def load_container(config: Config | None = None) -> Container:
    """Build the DI container and resolve the gate, exiting on bad config."""
    if config is None:
        config = load_config()
    try:
        container = create_container(config)
        container.get(AccessGate)
    except ConfigurationError as e:
        get_console().error(e.message, hint=CONFIG_HINT)
        sys.exit(CONFIG_ERROR_EXIT)
    return container
