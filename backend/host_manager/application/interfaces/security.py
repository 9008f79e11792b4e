"""Abstract interfaces (ports) for password hashing and access tokens."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``. Never raises."""
        ...


class TokenIssuer(ABC):
    """Port for signed, expiring access tokens."""

    @abstractmethod
    def issue(self, subject: str) -> str:
        ...

    @abstractmethod
    def decode(self, token: str) -> str | None:
        """Return the token subject, or None if the token is invalid or expired."""
        ...
