"""Config management commands."""

import json
import sys
from pathlib import Path

import cyclopts

from hrgate.cli.console import get_console

app = cyclopts.App(name="config", help="Manage hrgate configuration")


@app.command
def validate(path: Path) -> None:
    """Validate a YAML config file, including the access tables.

    Args:
        path: Path to the config file.
    """
    import yaml

    from hrgate.config import Config, build_access_policy
    from hrgate.domain.shared.error import ConfigurationError

    console = get_console()
    if not path.exists():
        console.error(f"{path} not found")
        sys.exit(1)

    try:
        data = yaml.safe_load(path.read_text()) or {}
        config = Config.model_validate(data)
        build_access_policy(config.access)
    except ConfigurationError as e:
        console.error(f"{path} is invalid:\n{e.message}")
        sys.exit(1)
    except Exception as e:
        console.error(f"{path} is invalid: {e}")
        sys.exit(1)

    console.success(f"{path} is valid")


@app.command
def show() -> None:
    """Show current effective config."""
    from hrgate.cli.util.container import load_config

    config = load_config()
    print(json.dumps(config.model_dump(mode="json"), indent=2, default=str))
