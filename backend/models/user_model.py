# backend/models/user_model.py

from models import db


class User(db.Model):
    __tablename__ = "usuario"

    id = db.Column(db.Integer, primary_key=True)
    cpf = db.Column(db.String(14), nullable=False)
    name = db.Column("nome", db.String(100), nullable=False)
    email = db.Column(db.String(150), unique=True, nullable=False)
    password = db.Column("senha", db.String(255), nullable=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_profile(self) -> dict:
        return {
            "id": self.id,
            "nome": self.name,
            "email": self.email,
            "isAdmin": bool(self.is_admin),
        }
