import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from models import db
from models import user_model, area_model, tree_model  # noqa: F401  (register tables)
from auth.routes import auth_bp
from trees.routes import trees_bp
from areas.routes import areas_bp
from stats.routes import stats_bp
from errors import register_error_handlers
from apidocs import init_api_docs
from config import Config


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    CORS(app, origins=app.config["ALLOWED_ORIGINS"], supports_credentials=True)

    db.init_app(app)
    with app.app_context():
        db.create_all()
    JWTManager(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(trees_bp)
    app.register_blueprint(areas_bp)
    app.register_blueprint(stats_bp)
    register_error_handlers(app)
    init_api_docs(app)

    @app.route("/")
    def read_root():
        return jsonify({"message": "BioUrb API - controle de arborização urbana"})

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=3001, debug=True)
