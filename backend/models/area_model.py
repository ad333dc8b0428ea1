# backend/models/area_model.py

from models import db
from models.enums import AreaStatus
from models.tree_model import _iso


class GreenArea(db.Model):
    __tablename__ = "areas_verdes"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column("nome", db.String(150), nullable=False)
    description = db.Column("descricao", db.Text, nullable=True)
    location = db.Column("localizacao", db.Text, nullable=False)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    responsible = db.Column("responsavel", db.String(150), nullable=True)
    status = db.Column(db.String(20), nullable=False, default=AreaStatus.ACTIVE.value)
    image_url = db.Column("imagem_url", db.String(500), nullable=True)
    user_id = db.Column("usuario_id", db.Integer, db.ForeignKey("usuario.id"), index=True, nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.name,
            "descricao": self.description,
            "localizacao": self.location,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "responsavel": self.responsible,
            "status": self.status,
            "imagem_url": self.image_url,
            "usuario_id": self.user_id,
            "created_at": _iso(self.created_at),
        }
