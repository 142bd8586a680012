"""Credential extractor port for the auth domain."""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Protocol

from hrgate.domain.auth.model.credential import Credential


class CredentialExtractor(Protocol):
    """Port for reading the caller's identity markers off a request.

    Implementations are adapters in infrastructure/ (e.g., CookieCredentialExtractor).
    They must not raise for missing or malformed values: anything unreadable
    is reported as absent.
    """

    @abstractmethod
    def extract(
        self,
        cookies: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> Credential:
        """Build a Credential from transport-level request context.

        Args:
            cookies: Request cookies by name.
            headers: Request headers by (case-insensitive where supported) name.

        Returns:
            The caller's credential snapshot.
        """
        ...
