# backend/areas/schemas.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.enums import AreaStatus


class AreaSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(alias="nome", min_length=1, max_length=150)
    description: Optional[str] = Field(default=None, alias="descricao")
    location: str = Field(alias="localizacao", min_length=1)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    responsible: Optional[str] = Field(default=None, alias="responsavel", max_length=150)
    status: Optional[AreaStatus] = None
    image_url: Optional[str] = Field(default=None, alias="imagemUrl", max_length=500)

    def columns(self) -> dict:
        values = self.model_dump(by_alias=False)
        values["status"] = (self.status or AreaStatus.ACTIVE).value
        return values


class AreaCreateSchema(AreaSchema):
    user_id: int = Field(alias="usuario_id")
