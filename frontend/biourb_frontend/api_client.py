from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .session import AuthSession
from .settings import Settings


logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    """Non-2xx answer (or transport failure, status 0) from the registry API."""

    def __init__(self, status: int, payload: Optional[dict] = None):
        self.status = status
        self.payload = payload or {}
        message = self.payload.get("msg") or self.payload.get("error") or f"HTTP {status}"
        super().__init__(f"{status}: {message}")


class ApiClient:
    """
    Thin wrapper over the registry REST endpoints.

    ``http`` is anything with a ``requests.Session``-compatible ``request``
    method; tests pass an adapter around the Flask test client.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http: Any = None,
    ):
        self.base_url = (base_url or Settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else Settings.HTTP_TIMEOUT
        self.http = http or requests.Session()
        self.session: Optional[AuthSession] = None

    # -------------------------
    # transport
    # -------------------------
    def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        headers = self.session.auth_header() if self.session is not None else {}
        url = f"{self.base_url}{path}"
        try:
            resp = self.http.request(method, url, json=json, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(0, {"error": str(e)}) from e

        try:
            payload = resp.json()
        except ValueError:
            payload = {"error": resp.text}

        if not (200 <= resp.status_code < 300):
            raise ApiError(resp.status_code, payload if isinstance(payload, dict) else {"error": payload})
        return payload

    # -------------------------
    # auth
    # -------------------------
    def register(self, cpf: str, name: str, email: str, password: str) -> dict:
        return self._request(
            "POST", "/register", {"cpf": cpf, "name": name, "email": email, "password": password}
        )

    def login(self, email: str, password: str) -> AuthSession:
        payload = self._request("POST", "/login", {"email": email, "password": password})
        self.session = AuthSession.from_login(payload)
        return self.session

    def logout(self) -> None:
        if self.session is not None:
            self.session.end()
        self.session = None

    # -------------------------
    # registry
    # -------------------------
    def get_stats(self) -> Dict[str, int]:
        return self._request("GET", "/stats")

    def list_trees(self) -> List[dict]:
        return self._request("GET", "/trees")

    def create_tree(self, payload: dict) -> int:
        return int(self._request("POST", "/trees", payload)["insertedId"])

    def update_tree(self, tree_id: int, payload: dict) -> dict:
        return self._request("PUT", f"/trees/{tree_id}", payload)

    def delete_tree(self, tree_id: int) -> dict:
        return self._request("DELETE", f"/trees/{tree_id}")

    def list_areas(self) -> List[dict]:
        return self._request("GET", "/areas")

    def create_area(self, payload: dict) -> int:
        return int(self._request("POST", "/areas", payload)["insertedId"])

    def update_area(self, area_id: int, payload: dict) -> dict:
        return self._request("PUT", f"/areas/{area_id}", payload)

    def delete_area(self, area_id: int) -> dict:
        return self._request("DELETE", f"/areas/{area_id}")
