"""Auth domain ports."""

from .credential_extractor import CredentialExtractor

__all__ = [
    "CredentialExtractor",
]
