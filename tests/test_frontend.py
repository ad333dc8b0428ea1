from datetime import date, datetime, timedelta, timezone

import pytest
import requests

from biourb_frontend import ApiClient, ApiError, Toaster
from biourb_frontend.pages import AreasPage, ContactPage, HomePage, TreesPage
from biourb_frontend.pages.trees import build_tree_payload


BASE_URL = "http://biourb.test"


class _FlaskResponse:
    def __init__(self, resp):
        self.status_code = resp.status_code
        self.text = resp.get_data(as_text=True)
        self._json = resp.get_json(silent=True)

    def json(self):
        if self._json is None:
            raise ValueError("not json")
        return self._json


class FlaskHttp:
    """requests-like transport that forwards to the Flask test client."""

    def __init__(self, client):
        self.client = client

    def request(self, method, url, json=None, headers=None, timeout=None):
        path = url[len(BASE_URL):]
        return _FlaskResponse(self.client.open(path, method=method, json=json, headers=headers or {}))


class BrokenHttp:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("connection refused")


class RecordingSender:
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    def send(self, template_params):
        if self.fail:
            raise requests.HTTPError("400 Bad Request")
        self.sent.append(template_params)


@pytest.fixture
def api(client):
    return ApiClient(base_url=BASE_URL, http=FlaskHttp(client))


@pytest.fixture
def logged_in(api):
    api.register("12345678900", "Ana Souza", "ana@biourb.com.br", "segredo123")
    api.login("ana@biourb.com.br", "segredo123")
    return api


@pytest.fixture
def toaster():
    return Toaster()


def _tree_form(**overrides):
    form = {
        "treeName": "Paubrasilia echinata",
        "popularName": "Pau-brasil",
        "plantingDate": "2019-09-21",
        "lifecondition": "Saudável",
        "location": "Canteiro central",
        "altura": "3.2",
        "diametro": "",
        "areaVerdeId": "",
    }
    form.update(overrides)
    return form


# -------------------------
# session lifecycle
# -------------------------
def test_login_starts_session(logged_in):
    session = logged_in.session
    assert session.is_active()
    assert session.name == "Ana Souza"
    assert session.expires_at > datetime.now(timezone.utc)
    assert session.expires_at <= datetime.now(timezone.utc) + timedelta(hours=1, minutes=1)


def test_session_expires(logged_in):
    later = datetime.now(timezone.utc) + timedelta(hours=2)
    assert logged_in.session.is_expired(now=later)
    assert not logged_in.session.is_active(now=later)


def test_logout_ends_session(logged_in):
    session = logged_in.session
    logged_in.logout()
    assert logged_in.session is None
    assert not session.is_active()
    assert session.auth_header() == {}


def test_login_failure_raises(api):
    with pytest.raises(ApiError) as exc:
        api.login("nao@biourb.com.br", "x")
    assert exc.value.status == 404
    assert api.session is None


# -------------------------
# home
# -------------------------
def test_home_loads_stats(logged_in):
    page = HomePage(logged_in)
    assert page.display()["totalArvores"] == "..."
    stats = page.load()
    assert stats["totalUsuarios"] == 1
    assert page.loading is False


def test_home_keeps_zeroes_when_api_down():
    page = HomePage(ApiClient(base_url=BASE_URL, http=BrokenHttp()))
    assert page.load() == {
        "totalArvores": 0,
        "totalAreas": 0,
        "totalUsuarios": 0,
        "arvoresSaudaveis": 0,
    }
    assert page.loading is False


# -------------------------
# trees
# -------------------------
def test_tree_form_validation():
    today = date(2024, 1, 10)
    assert build_tree_payload(_tree_form(location=""), today)[1] == "Preencha os campos obrigatórios."
    assert build_tree_payload(_tree_form(plantingDate="2020-13-40"), today)[1].startswith("Por favor")
    assert build_tree_payload(_tree_form(plantingDate="2024-01-11"), today)[1] == (
        "A data de plantio não pode ser no futuro."
    )
    assert build_tree_payload(_tree_form(lifecondition="Ótima"), today)[1] is not None
    assert build_tree_payload(_tree_form(altura="alto"), today)[1] is not None

    payload, error = build_tree_payload(_tree_form(), today)
    assert error is None
    assert payload["altura"] == 3.2
    assert payload["diametro"] is None
    assert payload["areaVerdeId"] is None


def test_tree_submit_requires_login(api, toaster):
    page = TreesPage(api, toaster)
    assert page.submit(_tree_form()) is None
    assert toaster.drain()[0].kind == "error"


def test_tree_submit_and_list(logged_in, toaster):
    page = TreesPage(logged_in, toaster)
    assert page.new_form()["usuName"] == "Ana Souza"

    tree_id = page.submit(_tree_form())
    assert tree_id is not None
    assert toaster.drain()[-1].message == "Árvore cadastrada com sucesso!"

    trees = page.load_trees()
    assert [t["id"] for t in trees] == [tree_id]
    assert trees[0]["nome_registrante"] == "Ana Souza"


def test_tree_submit_rejects_future_date_without_calling_api(logged_in, toaster):
    page = TreesPage(logged_in, toaster)
    future = (date.today() + timedelta(days=5)).isoformat()
    assert page.submit(_tree_form(plantingDate=future)) is None
    assert toaster.drain()[0].message == "A data de plantio não pode ser no futuro."
    assert page.load_trees() == []


def test_tree_delete_by_owner(logged_in, toaster):
    page = TreesPage(logged_in, toaster)
    page.submit(_tree_form())
    tree = page.load_trees()[0]

    assert page.delete(tree) is True
    assert page.trees == []


# -------------------------
# areas
# -------------------------
def test_area_create_and_list(logged_in, toaster):
    page = AreasPage(logged_in, toaster)
    page.toggle_form()

    area_id = page.submit({"nome": "Bosque Municipal", "localizacao": "Rua das Flores", "status": "Planejada"})
    assert area_id is not None
    assert page.show_form is False
    assert page.areas[0]["total_arvores"] == 0
    assert page.areas[0]["status"] == "Planejada"
    assert page.can_manage(page.areas[0])


def test_area_form_requires_name_and_location(logged_in, toaster):
    page = AreasPage(logged_in, toaster)
    assert page.submit({"nome": "Sem local"}) is None
    assert toaster.drain()[0].message == "Preencha os campos obrigatórios"


def test_area_delete_blocked_for_non_owner(logged_in, toaster):
    page = AreasPage(logged_in, toaster)
    area = {"id": 1, "usuario_id": logged_in.session.user_id + 1}
    assert page.can_manage(area) is False
    assert page.delete(area) is False
    assert toaster.drain()[0].kind == "error"


def test_area_load_failure_toasts(toaster):
    page = AreasPage(ApiClient(base_url=BASE_URL, http=BrokenHttp()), toaster)
    assert page.load() == []
    assert toaster.drain()[0].message == "Erro ao carregar áreas verdes"


# -------------------------
# contact
# -------------------------
def test_contact_sends_template(toaster):
    sender = RecordingSender()
    page = ContactPage(sender, toaster)

    assert page.submit("Ana", "ana@biourb.com.br", "Olá!") is True
    assert sender.sent == [{"from_name": "Ana", "message": "Olá!", "email": "ana@biourb.com.br"}]
    assert toaster.drain()[0].kind == "success"
    assert page.is_submitting is False


def test_contact_requires_all_fields(toaster):
    sender = RecordingSender()
    page = ContactPage(sender, toaster)
    assert page.submit("Ana", "", "Olá!") is False
    assert sender.sent == []
    assert toaster.drain()[0].message == "Preencha todos os campos!"


def test_contact_send_failure(toaster):
    page = ContactPage(RecordingSender(fail=True), toaster)
    assert page.submit("Ana", "ana@biourb.com.br", "Olá!") is False
    assert toaster.drain()[0].message == "Erro ao enviar mensagem. Tente novamente."
    assert page.is_submitting is False
