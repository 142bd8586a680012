"""Serve command - run the gated application under uvicorn."""

import cyclopts
import uvicorn

app = cyclopts.App(name="serve", help="Run the HTTP server")


@app.default
def serve(*, host: str = "127.0.0.1", port: int = 8000) -> None:
    """Start the server in the foreground.

    Args:
        host: Interface to bind.
        port: Port to listen on.
    """
    uvicorn.run(
        "hrgate.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
    )
