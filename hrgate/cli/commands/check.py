"""Check command - evaluate the gate for a path without a server."""

import sys

import cyclopts

from hrgate.cli.console import get_console
from hrgate.cli.util.container import load_container
from hrgate.config import Config
from hrgate.domain.access.service.access_gate import AccessGate

app = cyclopts.App(name="check", help="Evaluate access for a path")


@app.default
def check(path: str, *, token: str | None = None, role: str | None = None) -> None:
    """Evaluate the gate as if a request for PATH arrived with the given cookies.

    Exits 0 when access is allowed and 1 when the request would be redirected.

    Args:
        path: Request path, e.g. /hr/payroll.
        token: Value of the identity token cookie (omit for none).
        role: Value of the role cookie (omit for none).
    """
    console = get_console()
    container = load_container()
    config = container.get(Config)
    gate = container.get(AccessGate)

    cookies: dict[str, str] = {}
    if token is not None:
        cookies[config.credentials.token_cookie] = token
    if role is not None:
        cookies[config.credentials.role_cookie] = role

    decision = gate.check(path, cookies, {})
    if decision.allowed:
        console.success(f"{path}: allow")
        return

    console.error(f"{path}: {decision.outcome.value} -> {decision.redirect_to}")
    sys.exit(1)
