"""ASGI middleware that enforces the access gate on every matched request."""

import logging

from starlette.requests import Request
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from hrgate.application.api.path_matcher import PathMatcher
from hrgate.config import Config
from hrgate.domain.access.model.decision import AccessDecision, Outcome
from hrgate.domain.access.model.policy import AccessPolicy
from hrgate.domain.access.service.access_gate import AccessGate

logger = logging.getLogger(__name__)


class AccessGateMiddleware:
    """Runs AccessGate before any handler for paths the matcher selects.

    Dependencies are resolved from ``app.state.dishka_container``. Allowed
    requests pass through unmodified; everything else is redirected to the
    login or unauthorized page on the same origin. If evaluating the gate
    fails, the request is redirected to the unauthorized page.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive, send=send)
        container = request.app.state.dishka_container
        path = request.url.path

        if not container.get(PathMatcher).matches(path):
            return await self.app(scope, receive, send)

        gate = container.get(AccessGate)
        policy = container.get(AccessPolicy)
        redirect_status = container.get(Config).access.redirect_status

        try:
            decision = gate.check(path, request.cookies, request.headers)
        except Exception:
            logger.exception("Access gate failed on %s %s; denying", request.method, path)
            decision = AccessDecision(
                outcome=Outcome.REDIRECT_TO_UNAUTHORIZED,
                redirect_to=policy.unauthorized_path,
            )

        if decision.allowed:
            logger.debug("Access allowed: %s %s", request.method, path)
            return await self.app(scope, receive, send)

        target_path = decision.redirect_to or policy.unauthorized_path
        logger.info(
            "Access %s: %s %s -> %s",
            decision.outcome.value,
            request.method,
            path,
            target_path,
        )
        target = request.url.replace(path=target_path, query="", fragment="")
        response = RedirectResponse(url=str(target), status_code=redirect_status)
        return await response(scope, receive, send)
