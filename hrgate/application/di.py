from dishka import Container, Provider, Scope, make_container, provide

from hrgate.application.api.path_matcher import PathMatcher
from hrgate.config import Config
from hrgate.domain.access.util.di import AccessProvider
from hrgate.infrastructure.auth import AuthInfraProvider


class ApiProvider(Provider):
    """DI provider for HTTP-layer collaborators of the gate."""

    @provide(scope=Scope.APP)
    def get_path_matcher(self, config: Config) -> PathMatcher:
        return PathMatcher.from_patterns(config.access.matcher)


def create_container(config: Config | None = None) -> Container:
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()  # type: ignore[call-arg]

    return make_container(
        AccessProvider(),
        AuthInfraProvider(),
        ApiProvider(),
        context={Config: config},
    )
