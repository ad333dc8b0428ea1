# backend/stats/routes.py

from flask import Blueprint, jsonify

from .services import compute_stats


stats_bp = Blueprint("stats", __name__, url_prefix="/stats")


@stats_bp.route("", methods=["GET"])
def get_stats():
    """
    Retorna estatísticas gerais do sistema.
    ---
    tags:
      - Estatísticas
    responses:
      200:
        description: totalArvores, totalAreas, totalUsuarios e arvoresSaudaveis.
    """
    return jsonify(compute_stats()), 200
