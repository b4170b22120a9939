from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ADMIN_ROLES = frozenset({"admin", "service_role"})


class AuthUser(BaseModel):
    """Claims of a verified bearer token."""

    user_id: str = Field(..., alias="sub")
    email: Optional[EmailStr] = None
    role: str = "authenticated"

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def is_coach(self, admin_email: str) -> bool:
        """The coach holds an admin role claim or signs in with the admin email."""
        if self.role in ADMIN_ROLES:
            return True
        return self.email is not None and self.email.lower() == admin_email.lower()
