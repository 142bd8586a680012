"""Routes command - show the role hierarchy and protected route table."""

import cyclopts

from hrgate.cli.console import get_console
from hrgate.cli.util.container import load_container
from hrgate.domain.access.model.policy import AccessPolicy

app = cyclopts.App(name="routes", help="Show protected routes and role ranks")


@app.default
def routes() -> None:
    """Print the role hierarchy and the protected routes in match order."""
    console = get_console()
    policy = load_container().get(AccessPolicy)

    console.table(
        [{"role": role.value, "rank": rank} for role, rank in policy.hierarchy.ordered()],
        [("role", "Role"), ("rank", "Rank")],
        title="Role hierarchy",
    )
    console.table(
        [
            {"owner": route.owner.value, "prefixes": ", ".join(route.prefixes)}
            for route in policy.routes
        ],
        [("owner", "Owner"), ("prefixes", "Prefixes")],
        title="Protected routes (first match wins)",
        numbered=True,
    )
    console.info(
        f"Public: {', '.join(sorted(policy.public.exact))} (exact), "
        f"{', '.join(policy.public.prefixes)} (prefix)"
    )
