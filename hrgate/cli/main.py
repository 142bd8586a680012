"""Main CLI application using Cyclopts."""

import cyclopts

from hrgate.cli.commands import check, config, routes, serve

app = cyclopts.App(
    name="hrgate",
    help="HR portal access gate - CLI",
)

app.command(check.app, name="check")
app.command(routes.app, name="routes")
app.command(serve.app, name="serve")
app.command(config.app, name="config")
