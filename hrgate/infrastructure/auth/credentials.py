"""Credential extractor adapters: cookie/header reading and signed tokens."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import jwt
from jwt.algorithms import get_default_algorithms

from hrgate.config import CredentialsConfig
from hrgate.domain.auth.model.credential import ANONYMOUS, Credential
from hrgate.domain.auth.model.role import Role
from hrgate.domain.auth.port.credential_extractor import CredentialExtractor
from hrgate.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value


@dataclass(frozen=True)
class CookieCredentialExtractor(CredentialExtractor):
    """Reads token and role claim from cookies, falling back to headers.

    The presented values are trusted as-is: no signature or integrity check
    is made. Empty values count as absent.
    """

    token_cookie: str = "token"
    role_cookie: str = "role"
    token_header: str = "Authorization"
    role_header: str = "X-User-Role"

    def read_token(
        self,
        cookies: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> str | None:
        token = cookies.get(self.token_cookie)
        if token:
            return token

        auth_header = _header(headers, self.token_header)
        if not auth_header or not auth_header.startswith(BEARER_PREFIX):
            return None
        return auth_header[len(BEARER_PREFIX) :].strip() or None

    def read_role(
        self,
        cookies: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> str | None:
        role = cookies.get(self.role_cookie)
        if role:
            return role
        return _header(headers, self.role_header) or None

    def extract(
        self,
        cookies: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> Credential:
        token = self.read_token(cookies, headers)
        role = Role.parse(self.read_role(cookies, headers))
        return Credential(has_token=token is not None, role=role)


@dataclass(frozen=True)
class SignedTokenCredentialExtractor(CredentialExtractor):
    """Accepts only JWTs signed with the configured secret.

    An invalid or expired token is treated as no token at all. The role
    claim comes from the token's ``role`` claim; role cookies and headers
    are ignored.
    """

    reader: CookieCredentialExtractor
    secret: str
    algorithm: str = "HS256"
    audience: str | None = None

    def extract(
        self,
        cookies: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> Credential:
        token = self.reader.read_token(cookies, headers)
        if token is None:
            return ANONYMOUS

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                options={"verify_aud": self.audience is not None},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return Credential(has_token=False)
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected invalid token: %s", e)
            return Credential(has_token=False)

        claim = payload.get("role")
        return Credential(
            has_token=True,
            role=Role.parse(claim if isinstance(claim, str) else None),
        )


def create_credential_extractor(config: CredentialsConfig) -> CredentialExtractor:
    """Build the extractor described by config.

    Raises ConfigurationError if token verification is on without a secret
    or with an algorithm that cannot use a shared secret.
    """
    reader = CookieCredentialExtractor(
        token_cookie=config.token_cookie,
        role_cookie=config.role_cookie,
        token_header=config.token_header,
        role_header=config.role_header,
    )
    if not config.verify_token:
        return reader

    if not config.jwt_secret:
        raise ConfigurationError(
            "credentials.verify_token is enabled but credentials.jwt_secret is empty"
        )

    # The secret is shared, so only HMAC algorithms can use it
    if (
        config.jwt_algorithm not in get_default_algorithms()
        or not config.jwt_algorithm.startswith("HS")
    ):
        raise ConfigurationError(
            f"credentials.jwt_algorithm {config.jwt_algorithm!r} is not supported; "
            "use an HMAC algorithm (HS256, HS384, HS512)"
        )

    return SignedTokenCredentialExtractor(
        reader=reader,
        secret=config.jwt_secret,
        algorithm=config.jwt_algorithm,
        audience=config.jwt_audience,
    )
