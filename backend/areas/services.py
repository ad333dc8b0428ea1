# backend/areas/services.py

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func

from auth.permissions import ensure_can_modify
from errors import ValidationError
from models import db
from models.area_model import GreenArea
from models.tree_model import Tree
from models.user_model import User

from .schemas import AreaCreateSchema, AreaSchema


logger = logging.getLogger(__name__)


def create_area(data: AreaCreateSchema) -> GreenArea:
    if db.session.get(User, data.user_id) is None:
        raise ValidationError("Usuário não encontrado.")

    area = GreenArea(**data.columns())
    db.session.add(area)
    db.session.commit()

    logger.info("Green area %s registered by user %s", area.id, area.user_id)
    return area


def list_areas() -> List[dict]:
    """
    All green areas, newest first, with the registrant name and the number
    of trees currently assigned to each. Areas without trees report 0.
    """
    tree_count = func.count(Tree.id)
    rows = (
        db.session.query(GreenArea, User.name, tree_count)
        .join(User, GreenArea.user_id == User.id)
        .outerjoin(Tree, Tree.area_id == GreenArea.id)
        .group_by(GreenArea.id, User.name)
        .order_by(GreenArea.created_at.desc(), GreenArea.id.desc())
        .all()
    )

    out = []
    for area, registrant, total in rows:
        item = area.to_dict()
        item["nome_registrante"] = registrant
        item["total_arvores"] = int(total or 0)
        out.append(item)
    return out


def _owner_of(area_id: int) -> Optional[int]:
    return db.session.query(GreenArea.user_id).filter(GreenArea.id == area_id).scalar()


def update_area(area_id: int, data: AreaSchema) -> int:
    ensure_can_modify(_owner_of(area_id))

    count = GreenArea.query.filter_by(id=area_id).update(data.columns(), synchronize_session=False)
    db.session.commit()

    logger.info("Green area %s updated (%s row)", area_id, count)
    return count


def delete_area(area_id: int) -> int:
    """Delete by id; trees in the area are kept and lose their area link."""
    ensure_can_modify(_owner_of(area_id))

    Tree.query.filter_by(area_id=area_id).update({"area_id": None}, synchronize_session=False)
    count = GreenArea.query.filter_by(id=area_id).delete(synchronize_session=False)
    db.session.commit()

    logger.info("Green area %s deleted (%s row)", area_id, count)
    return count
