# backend/trees/services.py

from __future__ import annotations

import logging
from typing import List, Optional

from auth.permissions import ensure_can_modify
from errors import ValidationError
from models import db
from models.area_model import GreenArea
from models.tree_model import Tree
from models.user_model import User

from .schemas import TreeCreateSchema, TreeSchema


logger = logging.getLogger(__name__)


def _check_references(user_id: Optional[int], area_id: Optional[int]) -> None:
    if user_id is not None and db.session.get(User, user_id) is None:
        raise ValidationError("Usuário não encontrado.")
    if area_id is not None and db.session.get(GreenArea, area_id) is None:
        raise ValidationError("Área verde não encontrada.")


def create_tree(data: TreeCreateSchema) -> Tree:
    _check_references(data.user_id, data.area_id)

    tree = Tree(**data.columns())
    db.session.add(tree)
    db.session.commit()

    logger.info("Tree %s registered by user %s", tree.id, tree.user_id)
    return tree


def list_trees() -> List[dict]:
    """All trees, newest first, with registrant and area names joined in."""
    rows = (
        db.session.query(Tree, User.name, GreenArea.name)
        .join(User, Tree.user_id == User.id)
        .outerjoin(GreenArea, Tree.area_id == GreenArea.id)
        .order_by(Tree.created_at.desc(), Tree.id.desc())
        .all()
    )

    out = []
    for tree, registrant, area_name in rows:
        item = tree.to_dict()
        item["nome_registrante"] = registrant
        item["nome_area"] = area_name
        out.append(item)
    return out


def _owner_of(tree_id: int) -> Optional[int]:
    return db.session.query(Tree.user_id).filter(Tree.id == tree_id).scalar()


def update_tree(tree_id: int, data: TreeSchema) -> int:
    """
    Full replace of the mutable fields. An unknown id updates nothing and
    is not reported as an error; the affected row count is returned.
    """
    ensure_can_modify(_owner_of(tree_id))
    _check_references(None, data.area_id)

    count = Tree.query.filter_by(id=tree_id).update(data.columns(), synchronize_session=False)
    db.session.commit()

    logger.info("Tree %s updated (%s row)", tree_id, count)
    return count


def delete_tree(tree_id: int) -> int:
    ensure_can_modify(_owner_of(tree_id))

    count = Tree.query.filter_by(id=tree_id).delete(synchronize_session=False)
    db.session.commit()

    logger.info("Tree %s deleted (%s row)", tree_id, count)
    return count
