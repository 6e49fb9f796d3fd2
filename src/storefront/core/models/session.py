"""Server-side session records."""

import time

from pydantic import BaseModel, Field


class UserSession(BaseModel):
    """Persistent user session after a successful sign-in."""

    id: str = Field(description="Session identifier")
    user_id: str = Field(description="Internal user ID")
    ip_address: str | None = Field(default=None, description="Client address at sign-in")
    user_agent: str | None = Field(default=None, description="Client user agent at sign-in")
    created_at: int = Field(description="Creation timestamp")
    last_accessed_at: int = Field(description="Last access timestamp")
    expires_at: int = Field(description="Session expiration timestamp")

    @classmethod
    def create(
        cls,
        session_id: str,
        user_id: str,
        session_max_age: int,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> "UserSession":
        """Create a new user session with timestamps."""
        now = int(time.time())
        return cls(
            id=session_id,
            user_id=user_id,
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=now,
            last_accessed_at=now,
            expires_at=now + session_max_age,
        )

    def is_expired(self) -> bool:
        """Check if session is expired."""
        return time.time() > self.expires_at

    def update_access(self) -> None:
        """Update last accessed timestamp."""
        self.last_accessed_at = int(time.time())
