from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from ..api_client import ApiClient, ApiError
from ..notifications import Toaster


logger = logging.getLogger(__name__)

FORM_FIELDS = (
    "usuName",
    "treeName",
    "popularName",
    "plantingDate",
    "lifecondition",
    "location",
    "altura",
    "diametro",
    "areaVerdeId",
)
REQUIRED_FIELDS = ("treeName", "plantingDate", "lifecondition", "location")
HEALTH_OPTIONS = ("Saudável", "Doente", "Morrendo")


def _blank(value) -> bool:
    return value is None or str(value).strip() == ""


def _optional_float(value) -> Optional[float]:
    return None if _blank(value) else float(value)


def build_tree_payload(form: dict, today: date | None = None) -> Tuple[Optional[dict], Optional[str]]:
    """
    Validate the tree form the way the registration screen does and build
    the JSON body for POST/PUT /trees. Returns (payload, None) or
    (None, message).
    """
    if any(_blank(form.get(f)) for f in REQUIRED_FIELDS):
        return None, "Preencha os campos obrigatórios."

    try:
        planted = date.fromisoformat(str(form["plantingDate"]).strip())
    except ValueError:
        return None, "Por favor, insira uma data de plantio válida."
    if planted > (today or date.today()):
        return None, "A data de plantio não pode ser no futuro."

    if form["lifecondition"] not in HEALTH_OPTIONS:
        return None, "Selecione o estado de saúde da árvore."

    try:
        height = _optional_float(form.get("altura"))
        diameter = _optional_float(form.get("diametro"))
    except ValueError:
        return None, "Altura e diâmetro devem ser numéricos."

    area = form.get("areaVerdeId")
    try:
        area_id = None if _blank(area) else int(area)
    except ValueError:
        return None, "Área verde inválida."

    payload = {
        "treeName": str(form["treeName"]).strip(),
        "popularName": (str(form.get("popularName") or "").strip() or None),
        "plantingDate": planted.isoformat(),
        "lifecondition": form["lifecondition"],
        "location": str(form["location"]).strip(),
        "altura": height,
        "diametro": diameter,
        "areaVerdeId": area_id,
    }
    for key in ("latitude", "longitude", "imagemUrl"):
        if not _blank(form.get(key)):
            payload[key] = form[key]
    return payload, None


class TreesPage:
    """Tree registration form plus the list of registered trees."""

    def __init__(self, api: ApiClient, toaster: Toaster):
        self.api = api
        self.toaster = toaster
        self.areas: List[dict] = []
        self.trees: List[dict] = []

    @property
    def session(self):
        return self.api.session

    def new_form(self) -> dict:
        form = dict.fromkeys(FORM_FIELDS, "")
        if self.session is not None and self.session.is_active():
            form["usuName"] = self.session.name
        return form

    def load_areas(self) -> List[dict]:
        try:
            self.areas = self.api.list_areas()
        except ApiError as e:
            logger.error("Erro ao buscar áreas: %s", e)
        return self.areas

    def load_trees(self) -> List[dict]:
        try:
            self.trees = self.api.list_trees()
        except ApiError as e:
            logger.error("Erro ao buscar árvores: %s", e)
            self.toaster.error("Erro ao carregar árvores")
        return self.trees

    def submit(self, form: dict, today: date | None = None) -> Optional[int]:
        if self.session is None or not self.session.is_active():
            self.toaster.error("Faça login para cadastrar árvores.")
            return None

        payload, error = build_tree_payload(form, today=today)
        if error:
            self.toaster.error(error)
            return None
        payload["usuario_id"] = self.session.user_id

        try:
            tree_id = self.api.create_tree(payload)
        except ApiError as e:
            logger.error("Erro ao registrar árvore: %s", e)
            self.toaster.error("Erro ao registrar árvore. Verifique os dados.")
            return None

        self.toaster.success("Árvore cadastrada com sucesso!")
        return tree_id

    def update(self, tree: dict, form: dict, today: date | None = None) -> bool:
        if self.session is None or not self.session.can_manage(tree.get("usuario_id")):
            self.toaster.error("Você não pode editar esta árvore.")
            return False

        payload, error = build_tree_payload(form, today=today)
        if error:
            self.toaster.error(error)
            return False

        try:
            self.api.update_tree(tree["id"], payload)
        except ApiError as e:
            logger.error("Erro ao atualizar árvore: %s", e)
            self.toaster.error("Erro ao atualizar árvore.")
            return False

        self.toaster.success("Árvore atualizada com sucesso!")
        self.load_trees()
        return True

    def delete(self, tree: dict) -> bool:
        if self.session is None or not self.session.can_manage(tree.get("usuario_id")):
            self.toaster.error("Você não pode excluir esta árvore.")
            return False

        try:
            self.api.delete_tree(tree["id"])
        except ApiError as e:
            logger.error("Erro ao excluir árvore: %s", e)
            self.toaster.error("Erro ao excluir árvore.")
            return False

        self.toaster.success("Árvore excluída com sucesso!")
        self.load_trees()
        return True
