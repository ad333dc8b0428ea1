from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..api_client import ApiClient, ApiError
from ..notifications import Toaster


logger = logging.getLogger(__name__)

STATUS_OPTIONS = ("Ativa", "Em Manutenção", "Planejada")
FORM_FIELDS = ("nome", "descricao", "localizacao", "responsavel", "status")


def build_area_payload(form: dict) -> Tuple[Optional[dict], Optional[str]]:
    nome = str(form.get("nome") or "").strip()
    localizacao = str(form.get("localizacao") or "").strip()
    if not nome or not localizacao:
        return None, "Preencha os campos obrigatórios"

    status = form.get("status") or "Ativa"
    if status not in STATUS_OPTIONS:
        return None, "Status inválido"

    payload = {
        "nome": nome,
        "descricao": (str(form.get("descricao") or "").strip() or None),
        "localizacao": localizacao,
        "responsavel": (str(form.get("responsavel") or "").strip() or None),
        "status": status,
    }
    for key in ("latitude", "longitude", "imagemUrl"):
        if form.get(key) not in (None, ""):
            payload[key] = form[key]
    return payload, None


class AreasPage:
    """List of green areas with an inline creation form."""

    def __init__(self, api: ApiClient, toaster: Toaster):
        self.api = api
        self.toaster = toaster
        self.areas: List[dict] = []
        self.loading = True
        self.show_form = False

    @property
    def session(self):
        return self.api.session

    def new_form(self) -> dict:
        form = dict.fromkeys(FORM_FIELDS, "")
        form["status"] = "Ativa"
        return form

    def toggle_form(self) -> bool:
        self.show_form = not self.show_form
        return self.show_form

    def load(self) -> List[dict]:
        try:
            self.areas = self.api.list_areas()
        except ApiError as e:
            logger.error("Erro ao buscar áreas: %s", e)
            self.toaster.error("Erro ao carregar áreas verdes")
        finally:
            self.loading = False
        return self.areas

    def can_manage(self, area: dict) -> bool:
        return self.session is not None and self.session.can_manage(area.get("usuario_id"))

    def submit(self, form: dict) -> Optional[int]:
        if self.session is None or not self.session.is_active():
            self.toaster.error("Faça login para cadastrar áreas verdes.")
            return None

        payload, error = build_area_payload(form)
        if error:
            self.toaster.error(error)
            return None
        payload["usuario_id"] = self.session.user_id

        try:
            area_id = self.api.create_area(payload)
        except ApiError as e:
            logger.error("Erro ao cadastrar área: %s", e)
            self.toaster.error("Erro ao cadastrar área verde")
            return None

        self.toaster.success("Área verde cadastrada com sucesso!")
        self.show_form = False
        self.load()
        return area_id

    def update(self, area: dict, form: dict) -> bool:
        if not self.can_manage(area):
            self.toaster.error("Você não pode editar esta área verde")
            return False

        payload, error = build_area_payload(form)
        if error:
            self.toaster.error(error)
            return False

        try:
            self.api.update_area(area["id"], payload)
        except ApiError as e:
            logger.error("Erro ao atualizar área: %s", e)
            self.toaster.error("Erro ao atualizar área verde")
            return False

        self.toaster.success("Área verde atualizada com sucesso!")
        self.load()
        return True

    def delete(self, area: dict) -> bool:
        if not self.can_manage(area):
            self.toaster.error("Você não pode excluir esta área verde")
            return False

        try:
            self.api.delete_area(area["id"])
        except ApiError as e:
            logger.error("Erro ao excluir área: %s", e)
            self.toaster.error("Erro ao excluir área verde")
            return False

        self.toaster.success("Área verde excluída com sucesso!")
        self.load()
        return True
