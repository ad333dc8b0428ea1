# backend/trees/routes.py

from flask import Blueprint, jsonify

from errors import load_payload

from .schemas import TreeCreateSchema, TreeSchema
from . import services


trees_bp = Blueprint("trees", __name__, url_prefix="/trees")


@trees_bp.route("", methods=["POST"])
def create_tree():
    """
    Cadastra uma nova árvore associada a um usuário.
    ---
    tags:
      - Árvores
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [usuario_id, treeName, lifecondition, location, plantingDate]
          properties:
            usuario_id: {type: integer}
            treeName: {type: string}
            popularName: {type: string}
            lifecondition: {type: string, enum: ["Saudável", "Doente", "Morrendo"]}
            location: {type: string}
            plantingDate: {type: string, format: date}
            altura: {type: number}
            diametro: {type: number}
            latitude: {type: number}
            longitude: {type: number}
            imagemUrl: {type: string}
            areaVerdeId: {type: integer}
    responses:
      201:
        description: Árvore registrada; retorna insertedId.
      400:
        description: Campos obrigatórios ausentes ou inválidos.
    """
    data = load_payload(TreeCreateSchema, "Por favor, forneça todos os campos necessários.")
    tree = services.create_tree(data)
    return jsonify({"msg": "Árvore registrada com sucesso!", "insertedId": tree.id}), 201


@trees_bp.route("", methods=["GET"])
def list_trees():
    """
    Lista todas as árvores cadastradas, mais recentes primeiro.
    ---
    tags:
      - Árvores
    responses:
      200:
        description: Árvores com nome_registrante e nome_area.
    """
    return jsonify(services.list_trees()), 200


@trees_bp.route("/<int:tree_id>", methods=["PUT"])
def update_tree(tree_id):
    """
    Atualiza os dados de uma árvore existente.
    ---
    tags:
      - Árvores
    parameters:
      - in: path
        name: tree_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [treeName, lifecondition, location, plantingDate]
    responses:
      200:
        description: Árvore atualizada.
      400:
        description: Campos obrigatórios ausentes.
    """
    data = load_payload(TreeSchema, "Todos os campos obrigatórios devem ser preenchidos.")
    services.update_tree(tree_id, data)
    return jsonify({"msg": "Árvore atualizada com sucesso!"}), 200


@trees_bp.route("/<int:tree_id>", methods=["DELETE"])
def delete_tree(tree_id):
    """
    Remove uma árvore pelo ID.
    ---
    tags:
      - Árvores
    parameters:
      - in: path
        name: tree_id
        type: integer
        required: true
    responses:
      200:
        description: Árvore excluída.
    """
    services.delete_tree(tree_id)
    return jsonify({"msg": "Árvore excluída com sucesso!"}), 200
