# backend/stats/services.py

from models.area_model import GreenArea
from models.enums import HealthStatus
from models.tree_model import Tree
from models.user_model import User


def compute_stats() -> dict:
    """Registry totals, recomputed from the database on every call."""
    return {
        "totalArvores": Tree.query.count(),
        "totalAreas": GreenArea.query.count(),
        "totalUsuarios": User.query.count(),
        "arvoresSaudaveis": Tree.query.filter_by(health_status=HealthStatus.HEALTHY.value).count(),
    }
