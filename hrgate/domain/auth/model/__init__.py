"""Auth domain models."""

from .credential import ANONYMOUS, Credential
from .role import Role

__all__ = [
    "ANONYMOUS",
    "Credential",
    "Role",
]
