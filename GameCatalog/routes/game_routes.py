from functools import partial

from flask import Blueprint

from controllers.game_controller import health, list_games


def create_game_bp(catalog):
    game_bp = Blueprint("game_bp", __name__)

    game_bp.route("/", methods=["GET"])(health)
    game_bp.add_url_rule("/games", "list_games", partial(list_games, catalog), methods=["GET"])
    return game_bp
