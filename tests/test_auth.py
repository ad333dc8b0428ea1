from flask_jwt_extended import decode_token

from models.user_model import User


def test_root_is_alive(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "message" in resp.get_json()


def test_register_creates_user(register):
    resp = register()
    assert resp.status_code == 201
    assert resp.get_json()["msg"] == "Usuário cadastrado com sucesso"

    user = User.query.filter_by(email="ana@biourb.com.br").one()
    assert user.cpf == "12345678900"
    assert user.name == "Ana Souza"
    assert user.is_admin is False
    # only the hash is stored
    assert user.password != "segredo123"


def test_register_duplicate_email_keeps_first_user(register):
    assert register().status_code == 201

    resp = register(name="Outra Pessoa", cpf="11111111111", password="outra")
    assert resp.status_code == 400
    assert resp.get_json()["msg"] == "Email já cadastrado"

    users = User.query.filter_by(email="ana@biourb.com.br").all()
    assert len(users) == 1
    assert users[0].name == "Ana Souza"
    assert users[0].cpf == "12345678900"


def test_register_requires_all_fields(client):
    resp = client.post("/register", json={"email": "x@biourb.com.br", "password": "abc"})
    assert resp.status_code == 400
    body = resp.get_json()
    missing = {e["loc"][0] for e in body["error"]}
    assert {"cpf", "name"} <= missing
    assert User.query.count() == 0


def test_login_returns_profile_and_token(app, register, login):
    register()
    resp = login()
    assert resp.status_code == 200

    body = resp.get_json()
    assert body["user"]["nome"] == "Ana Souza"
    assert body["user"]["email"] == "ana@biourb.com.br"
    assert body["user"]["isAdmin"] is False

    claims = decode_token(body["token"])
    assert claims["sub"] == str(body["user"]["id"])
    assert claims["exp"] - claims["iat"] == 3600


def test_login_wrong_password(register, login):
    register()
    for attempt in ("errada", "SEGREDO123", "segredo1234"):
        resp = login(password=attempt)
        assert resp.status_code == 401
        assert resp.get_json()["msg"] == "Senha incorreta"
        assert "token" not in resp.get_json()


def test_login_unknown_email(login):
    resp = login(email="ninguem@biourb.com.br")
    assert resp.status_code == 404


def test_login_missing_password_is_validation_error(client):
    resp = client.post("/login", json={"email": "ana@biourb.com.br"})
    assert resp.status_code == 400


def test_password_is_kept_exactly_as_typed(register, login):
    assert register(password=" segredo123 ").status_code == 201

    assert login(password=" segredo123 ").status_code == 200
    assert login(password="segredo123").status_code == 401


def test_login_malformed_unknown_email_is_not_found(login):
    resp = login(email="nao-e-um-email")
    assert resp.status_code == 404
    assert resp.get_json()["msg"] == "Usuário não registrado!"
