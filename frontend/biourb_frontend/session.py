from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import jwt


@dataclass
class AuthSession:
    """
    Identity of the logged-in user.

    Created from the /login response and ended on logout. The expiry is read
    from the token's ``exp`` claim; the signature is not checked here since
    the server does that on every authenticated call.
    """

    user_id: int
    name: str
    email: str
    is_admin: bool
    token: str
    expires_at: Optional[datetime] = None
    ended: bool = False

    @classmethod
    def from_login(cls, payload: dict) -> "AuthSession":
        user = payload.get("user") or {}
        token = payload.get("token") or ""
        return cls(
            user_id=int(user["id"]),
            name=str(user.get("nome") or ""),
            email=str(user.get("email") or ""),
            is_admin=bool(user.get("isAdmin") or False),
            token=token,
            expires_at=_token_expiry(token),
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at

    def is_active(self, now: Optional[datetime] = None) -> bool:
        return not self.ended and bool(self.token) and not self.is_expired(now)

    def end(self) -> None:
        self.ended = True
        self.token = ""

    def can_manage(self, owner_id: Optional[int]) -> bool:
        """UI rule for edit/delete buttons: registrant or admin."""
        if not self.is_active():
            return False
        return self.is_admin or (owner_id is not None and int(owner_id) == self.user_id)

    def auth_header(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.is_active() else {}


def _token_expiry(token: str) -> Optional[datetime]:
    if not token:
        return None
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return None
    exp = claims.get("exp")
    if exp is None:
        return None
    return datetime.fromtimestamp(int(exp), tz=timezone.utc)
