import logging

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# noinspection PyUnresolvedReferences
from models import category, developer, game, image, db
from repositories import GameCatalog
from routes.game_routes import create_game_bp
from routes.image_routes import create_image_bp

logger = logging.getLogger(__name__)

migrate = Migrate()


def configure_logging(level):
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")


def create_app(overrides=None, catalog=None):
    application = Flask(__name__)
    application.config.from_object('config')
    if overrides:
        application.config.update(overrides)
    application.json.sort_keys = False

    configure_logging(application.config["LOG_LEVEL"])

    db.init_app(application)
    migrate.init_app(application, db)
    with application.app_context():
        db.create_all()

    CORS(application, origins=application.config["CORS_ORIGINS"])

    if catalog is None:
        catalog = GameCatalog(db)
    application.extensions["game_catalog"] = catalog

    application.register_blueprint(create_game_bp(catalog))
    application.register_blueprint(create_image_bp(catalog))
    return application


if __name__ == '__main__':
    application = create_app()
    port = application.config["PORT"]
    logger.info("Servidor rodando em http://localhost:%s", port)
    try:
        application.run(host=application.config["HOST"], port=port)
    finally:
        with application.app_context():
            application.extensions["game_catalog"].close()
