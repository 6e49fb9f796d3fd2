"""Server-side session lifecycle."""

from loguru import logger

from src.storefront.core.models.session import UserSession
from src.storefront.core.security import generate_secure_token
from src.storefront.core.storage.session_storage import SessionStorage
from src.storefront.entities.user import User
from src.storefront.runtime.context import get_config


def _key(session_id: str) -> str:
    return f"user:{session_id}"


class SessionService:
    """Starts, resumes and terminates user sessions."""

    def __init__(self, session_storage: SessionStorage) -> None:
        self._storage = session_storage

    async def start_session(
        self,
        user: User,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> UserSession:
        """Create a session for a freshly authenticated user."""
        max_age = get_config().app.session_max_age
        user_session = UserSession.create(
            session_id=generate_secure_token(32),
            user_id=user.id,
            session_max_age=max_age,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        await self._storage.set(_key(user_session.id), user_session, max_age)
        logger.info("Started session for user {}", user.id)
        return user_session

    async def resume_session(self, session_id: str | None) -> UserSession | None:
        """Return the live session for ``session_id``, or None.

        Expired sessions are deleted and treated as absent.
        """
        if not session_id:
            return None

        user_session = await self._storage.get(_key(session_id), UserSession)
        if user_session is None:
            return None

        if user_session.is_expired():
            await self._storage.delete(_key(session_id))
            return None

        user_session.update_access()
        remaining = max(user_session.expires_at - user_session.last_accessed_at, 1)
        await self._storage.set(_key(session_id), user_session, remaining)
        return user_session

    async def terminate_session(self, session_id: str) -> None:
        await self._storage.delete(_key(session_id))
        logger.info("Terminated session")

    async def purge_expired(self) -> int:
        purged = await self._storage.cleanup_expired()
        if purged:
            logger.info("Purged {} expired sessions", purged)
        return purged
