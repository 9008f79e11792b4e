"""Application service for the admin login.

Only a bcrypt hash of the admin password is stored. The plaintext
``admin_password`` setting is used once, to create the first credential.
"""

import logging

from host_manager.application.interfaces import (
    AdminCredentialRepository,
    PasswordHasher,
    TokenIssuer,
)
from host_manager.application.schemas import CredentialsUpdate
from host_manager.domain.entities import AdminCredential
from host_manager.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class AuthService:
    """Verifies admin credentials and issues / checks access tokens."""

    def __init__(
        self,
        repository: AdminCredentialRepository,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ):
        self._repository = repository
        self._hasher = hasher
        self._tokens = tokens

    async def ensure_admin(self, username: str, password: str) -> bool:
        """Create the admin credential if none exists. Returns True if created."""
        if await self._repository.get() is not None:
            return False
        await self._repository.save(
            AdminCredential(username=username, password_hash=self._hasher.hash(password))
        )
        logger.info("Bootstrapped admin credential for '%s'", username)
        return True

    async def login(self, username: str, password: str) -> str:
        credential = await self._repository.get()
        if (
            credential is None
            or credential.username != username
            or not self._hasher.verify(password, credential.password_hash)
        ):
            logger.warning("Failed login attempt for '%s'", username)
            raise AuthenticationError()
        return self._tokens.issue(credential.username)

    async def change_credentials(self, data: CredentialsUpdate) -> AdminCredential:
        credential = await self._repository.get()
        if credential is None or not self._hasher.verify(
            data.current_password, credential.password_hash
        ):
            raise AuthenticationError("Current password is incorrect")
        credential.update(
            username=data.new_username,
            password_hash=self._hasher.hash(data.new_password),
        )
        saved = await self._repository.save(credential)
        logger.info("Admin credentials changed (username='%s')", saved.username)
        return saved

    async def authenticate_token(self, token: str) -> str:
        """Return the admin username for a valid token.

        Tokens issued before a username change stop working.
        """
        subject = self._tokens.decode(token)
        if subject is None:
            raise AuthenticationError("Invalid or expired token")
        credential = await self._repository.get()
        if credential is None or credential.username != subject:
            raise AuthenticationError("Invalid or expired token")
        return subject
