# backend/auth/permissions.py

from typing import Optional

from flask import current_app
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from errors import AuthError, Forbidden
from models import db
from models.user_model import User


def acting_user_id() -> Optional[int]:
    """Id carried by the bearer token, or None when no token was sent."""
    verify_jwt_in_request(optional=True)
    identity = get_jwt_identity()
    return int(identity) if identity is not None else None


def ensure_can_modify(owner_id: Optional[int]) -> Optional[int]:
    """
    Gate for update/delete on registry records.

    Only active when ENFORCE_OWNERSHIP is set. ``owner_id`` is None when the
    record does not exist; the caller still needs a token but the
    operation stays a no-op.
    """
    if not current_app.config.get("ENFORCE_OWNERSHIP"):
        return None

    user_id = acting_user_id()
    if user_id is None:
        raise AuthError("Token de acesso obrigatório")
    if owner_id is None:
        return user_id

    user = db.session.get(User, user_id)
    if user is None or (user.id != owner_id and not user.is_admin):
        raise Forbidden("Apenas o registrante ou um administrador pode alterar este registro")
    return user_id
