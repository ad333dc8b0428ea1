# backend/auth/routes.py

from flask import Blueprint, jsonify

from auth.schemas import RegisterSchema, LoginSchema
from auth.services import register_user, login_user
from errors import load_payload

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    """
    Registra um novo usuário.
    ---
    tags:
      - Autenticação
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [cpf, name, email, password]
          properties:
            cpf: {type: string}
            name: {type: string}
            email: {type: string}
            password: {type: string}
    responses:
      201:
        description: Usuário cadastrado com sucesso.
      400:
        description: Email já cadastrado ou campos ausentes.
    """

    data = load_payload(RegisterSchema, "Preencha CPF, nome, email e senha.")
    register_user(data)

    return jsonify({"msg": "Usuário cadastrado com sucesso"}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    """
    Realiza login de um usuário.
    ---
    tags:
      - Autenticação
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [email, password]
          properties:
            email: {type: string}
            password: {type: string}
    responses:
      200:
        description: Usuário logado; retorna o perfil e o token JWT.
      401:
        description: Senha incorreta.
      404:
        description: Usuário não registrado.
    """

    data = load_payload(LoginSchema, "Email e senha são obrigatórios.")
    result = login_user(data)

    return jsonify(result), 200
