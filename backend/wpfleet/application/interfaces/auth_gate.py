"""Abstract interface for resolving a bearer credential to a user."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wpfleet.domain.entities import User


@dataclass(frozen=True)
class AuthResult:
    """Outcome of an authentication attempt."""

    success: bool
    user: User | None = None
    reason: str | None = None


class AuthGate(ABC):
    """Port for request authentication — implemented in the infrastructure layer."""

    @abstractmethod
    async def authenticate(self, authorization: str | None) -> AuthResult:
        """Verify an ``Authorization`` header value.

        Never raises for a bad credential; a failure is reported through
        ``AuthResult.success``.
        """
        ...
