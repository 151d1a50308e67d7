import base64
import logging
from datetime import datetime, timezone

from flask import Response, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from controllers import error_response

logger = logging.getLogger(__name__)


def to_data_uri(data, mimetype):
    if data is None:
        return None
    return f"data:{mimetype};base64,{base64.b64encode(data).decode('ascii')}"


def to_iso_timestamp(value):
    """Format ``value`` as UTC ISO-8601 with milliseconds and a ``Z`` suffix; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def summarize_game(game, mimetype):
    return {
        "id": game.id,
        "name": game.name,
        "image": to_data_uri(game.image.data, mimetype) if game.image else None,
        "description": game.description,
        "price": game.price,
        "release_date": to_iso_timestamp(game.release_date),
        "developer": game.developer.name if game.developer else None,
        "categories": [category.name for category in game.categories],
    }


def list_games(catalog):
    try:
        mimetype = current_app.config["IMAGE_MIMETYPE"]
        return jsonify([summarize_game(game, mimetype) for game in catalog.list_games()])
    except SQLAlchemyError:
        catalog.rollback()
        logger.exception("Error listing games")
        return error_response("Erro ao buscar jogos", 500)


def health():
    now = to_iso_timestamp(datetime.now(timezone.utc))
    return Response(f"Servidor ativo - {now}", mimetype="text/plain")
