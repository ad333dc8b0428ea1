# backend/trees/schemas.py

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.enums import HealthStatus


class TreeSchema(BaseModel):
    """Mutable tree fields, keyed by the names the web client posts."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    scientific_name: str = Field(alias="treeName", min_length=1, max_length=150)
    popular_name: Optional[str] = Field(default=None, alias="popularName", max_length=150)
    planting_date: date = Field(alias="plantingDate")
    health_status: HealthStatus = Field(alias="lifecondition")
    location: str = Field(min_length=1)
    height: Optional[float] = Field(default=None, alias="altura", ge=0)
    diameter: Optional[float] = Field(default=None, alias="diametro", ge=0)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    image_url: Optional[str] = Field(default=None, alias="imagemUrl", max_length=500)
    area_id: Optional[int] = Field(default=None, alias="areaVerdeId")

    def columns(self) -> dict:
        values = self.model_dump(by_alias=False)
        values["health_status"] = self.health_status.value
        return values


class TreeCreateSchema(TreeSchema):
    user_id: int = Field(alias="usuario_id")
