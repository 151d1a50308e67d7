from functools import partial

from flask import Blueprint

from controllers.image_controller import delete_image, get_image, replace_image, upload_image


def create_image_bp(catalog):
    image_bp = Blueprint("image_bp", __name__)

    image_bp.add_url_rule("/upload/<game_id>", "upload_image", partial(upload_image, catalog), methods=["POST"])
    image_bp.add_url_rule("/upload/<game_id>", "replace_image", partial(replace_image, catalog), methods=["PUT"])
    image_bp.add_url_rule("/upload/<game_id>", "delete_image", partial(delete_image, catalog), methods=["DELETE"])
    image_bp.add_url_rule("/image/<image_id>", "get_image", partial(get_image, catalog), methods=["GET"])
    return image_bp
