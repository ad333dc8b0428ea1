# backend/areas/routes.py

from flask import Blueprint, jsonify

from errors import load_payload

from .schemas import AreaCreateSchema, AreaSchema
from . import services


areas_bp = Blueprint("areas", __name__, url_prefix="/areas")


@areas_bp.route("", methods=["GET"])
def list_areas():
    """
    Lista todas as áreas verdes.
    ---
    tags:
      - Áreas Verdes
    responses:
      200:
        description: Áreas com nome_registrante e total_arvores.
    """
    return jsonify(services.list_areas()), 200


@areas_bp.route("", methods=["POST"])
def create_area():
    """
    Cadastra uma nova área verde.
    ---
    tags:
      - Áreas Verdes
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [nome, localizacao, usuario_id]
          properties:
            nome: {type: string}
            descricao: {type: string}
            localizacao: {type: string}
            latitude: {type: number}
            longitude: {type: number}
            responsavel: {type: string}
            status: {type: string, enum: ["Ativa", "Em Manutenção", "Planejada"]}
            imagemUrl: {type: string}
            usuario_id: {type: integer}
    responses:
      201:
        description: Área verde registrada; retorna insertedId.
      400:
        description: Nome, localização e usuário são obrigatórios.
    """
    data = load_payload(AreaCreateSchema, "Nome, localização e usuário são obrigatórios.")
    area = services.create_area(data)
    return jsonify({"msg": "Área verde registrada com sucesso!", "insertedId": area.id}), 201


@areas_bp.route("/<int:area_id>", methods=["PUT"])
def update_area(area_id):
    """
    Atualiza uma área verde.
    ---
    tags:
      - Áreas Verdes
    parameters:
      - in: path
        name: area_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [nome, localizacao]
    responses:
      200:
        description: Área verde atualizada.
      400:
        description: Nome e localização são obrigatórios.
    """
    data = load_payload(AreaSchema, "Nome e localização são obrigatórios.")
    services.update_area(area_id, data)
    return jsonify({"msg": "Área verde atualizada com sucesso!"}), 200


@areas_bp.route("/<int:area_id>", methods=["DELETE"])
def delete_area(area_id):
    """
    Remove uma área verde.
    ---
    tags:
      - Áreas Verdes
    parameters:
      - in: path
        name: area_id
        type: integer
        required: true
    responses:
      200:
        description: Área verde excluída.
    """
    services.delete_area(area_id)
    return jsonify({"msg": "Área verde excluída com sucesso!"}), 200
