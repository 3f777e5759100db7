"""AuthUser entity - the signed-in salon operator."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AuthUser:
    """An authenticated account; its uid scopes every stored collection."""

    uid: str
    email: str
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AuthUser":
        """Creates an AuthUser from an identity toolkit response."""
        return cls(
            uid=data["localId"],
            email=data.get("email", ""),
            id_token=data.get("idToken"),
            refresh_token=data.get("refreshToken"),
        )
