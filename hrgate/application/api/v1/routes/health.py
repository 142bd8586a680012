"""Health check route."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from hrgate.config import Config
from hrgate.domain.access.model.policy import AccessPolicy

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Service status plus the role hierarchy the gate enforces."""

    status: str
    service: str
    version: str
    roles: dict[str, int]


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    container = request.app.state.dishka_container
    config = container.get(Config)
    policy = container.get(AccessPolicy)
    return HealthResponse(
        status="ok",
        service=config.server.name,
        version=config.server.version,
        roles={role.value: rank for role, rank in policy.hierarchy.ordered()},
    )
