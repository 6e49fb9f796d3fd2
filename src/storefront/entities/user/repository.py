"""User repository for data access operations."""

from sqlmodel import Session, col, select

from .entity import User, normalize_email
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_email(self, email_address: str) -> User | None:
        statement = select(UserTable).where(
            UserTable.email_address == normalize_email(email_address)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, user: User) -> User:
        row = UserTable.model_validate(user.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(col(UserTable.created_at))
        return [
            User.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement).all()
        ]
