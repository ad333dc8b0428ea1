# backend/models/tree_model.py

from models import db


def _iso(value):
    return value.isoformat() if value is not None else None


class Tree(db.Model):
    """
    A registered urban tree.
    Column names follow the registry's original schema; the JSON view
    returned by the API uses the same names.
    """

    __tablename__ = "arvore"

    id = db.Column(db.Integer, primary_key=True)

    # Identity
    scientific_name = db.Column("nome_cientifico", db.String(150), nullable=False)
    popular_name = db.Column("nome_popular", db.String(150), nullable=True)
    planting_date = db.Column("data_plantio", db.Date, nullable=False)

    # Condition
    health_status = db.Column("estado_saude", db.String(20), nullable=False, index=True)  # HealthStatus value
    height = db.Column("altura", db.Float, nullable=True)  # metres
    diameter = db.Column("diametro", db.Float, nullable=True)  # centimetres

    # Where
    location = db.Column("localizacao", db.Text, nullable=False)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    image_url = db.Column("imagem_url", db.String(500), nullable=True)

    # Relations
    area_id = db.Column(
        "area_verde_id",
        db.Integer,
        db.ForeignKey("areas_verdes.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )
    user_id = db.Column("usuario_id", db.Integer, db.ForeignKey("usuario.id"), index=True, nullable=False)

    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome_cientifico": self.scientific_name,
            "nome_popular": self.popular_name,
            "data_plantio": _iso(self.planting_date),
            "estado_saude": self.health_status,
            "localizacao": self.location,
            "altura": self.height,
            "diametro": self.diameter,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "imagem_url": self.image_url,
            "area_verde_id": self.area_id,
            "usuario_id": self.user_id,
            "created_at": _iso(self.created_at),
        }
