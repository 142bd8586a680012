"""DI provider for auth infrastructure."""

from dishka import Provider, Scope, provide

from hrgate.config import Config
from hrgate.domain.auth.port.credential_extractor import CredentialExtractor
from hrgate.infrastructure.auth.credentials import create_credential_extractor


class AuthInfraProvider(Provider):
    """DI provider for auth infrastructure adapters."""

    @provide(scope=Scope.APP)
    def get_credential_extractor(self, config: Config) -> CredentialExtractor:
        return create_credential_extractor(config.credentials)
