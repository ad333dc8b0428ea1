# backend/models/enums.py

from enum import Enum


class HealthStatus(str, Enum):
    """Condition of a tree, stored by its display value."""

    HEALTHY = "Saudável"
    SICK = "Doente"
    DYING = "Morrendo"


class AreaStatus(str, Enum):
    ACTIVE = "Ativa"
    UNDER_MAINTENANCE = "Em Manutenção"
    PLANNED = "Planejada"
