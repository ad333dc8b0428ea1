# backend/apidocs.py

from flasgger import Swagger


SWAGGER_TEMPLATE = {
    "info": {
        "title": "API do Sistema de Controle de Arborização Urbana - BioUrb",
        "version": "1.0.0",
        "description": "Autenticação de usuários e gerenciamento de árvores e áreas verdes.",
    },
    "securityDefinitions": {
        "Bearer": {"type": "apiKey", "name": "Authorization", "in": "header"},
    },
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec",
            "route": "/api-docs.json",
            "rule_filter": lambda rule: True,
            "model_filter": lambda tag: True,
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/api-docs/",
}


def init_api_docs(app):
    """Serve the OpenAPI document at /api-docs.json and the UI at /api-docs/."""
    return Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)
