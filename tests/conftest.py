import pytest

from app import create_app
from config import TestConfig
from models import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    def _register(email="ana@biourb.com.br", password="segredo123", name="Ana Souza", cpf="12345678900"):
        return client.post(
            "/register",
            json={"cpf": cpf, "name": name, "email": email, "password": password},
        )

    return _register


@pytest.fixture
def login(client):
    def _login(email="ana@biourb.com.br", password="segredo123"):
        return client.post("/login", json={"email": email, "password": password})

    return _login


@pytest.fixture
def user(register, login):
    """Registered and logged-in user: the /login JSON body."""
    register()
    return login().get_json()


@pytest.fixture
def other_user(register, login):
    register(email="bruno@biourb.com.br", name="Bruno Lima", cpf="98765432100")
    return login(email="bruno@biourb.com.br").get_json()


@pytest.fixture
def tree_payload(user):
    def _payload(**overrides):
        body = {
            "usuario_id": user["user"]["id"],
            "treeName": "Handroanthus albus",
            "popularName": "Ipê-amarelo",
            "lifecondition": "Saudável",
            "location": "Praça da Matriz, em frente à igreja",
            "plantingDate": "2020-03-15",
            "altura": 4.5,
            "diametro": 20,
        }
        body.update(overrides)
        return body

    return _payload


@pytest.fixture
def area_payload(user):
    def _payload(**overrides):
        body = {
            "usuario_id": user["user"]["id"],
            "nome": "Parque das Araucárias",
            "descricao": "Parque municipal",
            "localizacao": "Av. Araucária, 1234",
            "responsavel": "Secretaria do Meio Ambiente",
            "status": "Ativa",
        }
        body.update(overrides)
        return body

    return _payload


def auth_header(login_body):
    return {"Authorization": f"Bearer {login_body['token']}"}
