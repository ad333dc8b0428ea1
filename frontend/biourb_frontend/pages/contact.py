from __future__ import annotations

import logging

import requests

from ..notifications import Toaster
from ..settings import Settings


logger = logging.getLogger(__name__)


class EmailJsSender:
    """Sends a template email through the EmailJS REST endpoint."""

    def __init__(
        self,
        service_id: str | None = None,
        template_id: str | None = None,
        public_key: str | None = None,
        url: str | None = None,
        timeout: float | None = None,
        http=None,
    ):
        self.service_id = service_id or Settings.EMAILJS_SERVICE_ID
        self.template_id = template_id or Settings.EMAILJS_TEMPLATE_ID
        self.public_key = public_key or Settings.EMAILJS_PUBLIC_KEY
        self.url = url or Settings.EMAILJS_URL
        self.timeout = timeout if timeout is not None else Settings.HTTP_TIMEOUT
        self.http = http or requests.Session()

    def send(self, template_params: dict) -> None:
        resp = self.http.post(
            self.url,
            json={
                "service_id": self.service_id,
                "template_id": self.template_id,
                "user_id": self.public_key,
                "template_params": template_params,
            },
            timeout=self.timeout,
        )
        resp.raise_for_status()


class ContactPage:
    def __init__(self, sender: EmailJsSender, toaster: Toaster):
        self.sender = sender
        self.toaster = toaster
        self.form = {"name": "", "email": "", "message": ""}
        self.is_submitting = False

    def submit(self, name: str, email: str, message: str) -> bool:
        if not name or not email or not message:
            self.toaster.error("Preencha todos os campos!")
            return False

        self.is_submitting = True
        try:
            self.sender.send({"from_name": name, "message": message, "email": email})
        except requests.RequestException as e:
            logger.error("Erro ao enviar mensagem: %s", e)
            self.toaster.error("Erro ao enviar mensagem. Tente novamente.")
            return False
        finally:
            self.is_submitting = False

        self.toaster.success("Mensagem enviada com sucesso!")
        self.form = {"name": "", "email": "", "message": ""}
        return True
