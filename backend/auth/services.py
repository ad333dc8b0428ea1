# backend/auth/services.py

import logging

from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from errors import AuthError, DuplicateResource, NotFound
from models import db
from models.user_model import User


logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MSG = "Email já cadastrado"


def register_user(data):

    existing = User.query.filter_by(email=data.email).first()
    if existing:
        raise DuplicateResource(DUPLICATE_EMAIL_MSG)

    user = User(
        cpf=data.cpf,
        name=data.name,
        email=data.email,
        password=generate_password_hash(data.password),
    )

    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # lost a race against a concurrent registration with the same email
        db.session.rollback()
        raise DuplicateResource(DUPLICATE_EMAIL_MSG)

    logger.info("Registered user %s", user.id)
    return user


def login_user(data):

    user = User.query.filter_by(email=data.email).first()

    if not user:
        raise NotFound("Usuário não registrado!")

    if not check_password_hash(user.password, data.password):
        raise AuthError("Senha incorreta")

    token = create_access_token(identity=str(user.id))

    return {
        "msg": "Usuário logado",
        "user": user.to_profile(),
        "token": token,
    }
