"""User registration and credential checks."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.security import hash_password, verify_password
from src.storefront.entities.user import User, UserRepository


class UserService:
    """Creates users and authenticates them by email address and password."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._users = UserRepository(session)

    def register(self, email_address: str, password: str) -> User:
        """Create a user.

        Raises:
            ValueError: the email address is blank, already taken, or the
                password is empty.
        """
        if not email_address.strip():
            raise ValueError("Email address can't be blank")
        if not password:
            raise ValueError("Password can't be blank")
        if self._users.get_by_email(email_address) is not None:
            raise ValueError(f"Email address {email_address} is already taken")

        user = self._users.create(
            User(email_address=email_address, password_digest=hash_password(password))
        )
        self._session.commit()
        logger.info("Registered user {}", user.id)
        return user

    def authenticate(self, email_address: str, password: str) -> User | None:
        """Return the user when the credentials match, otherwise None."""
        user = self._users.get_by_email(email_address)
        if user is None or not verify_password(password, user.password_digest):
            logger.info("Failed sign-in attempt")
            return None
        return user

    def list_users(self) -> list[User]:
        return self._users.list_all()
