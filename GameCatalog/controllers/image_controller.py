import logging

from flask import Response, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from controllers import GAME_NOT_FOUND, INVALID_ID, error_response, parse_id
from forms.image_form import ImageForm

logger = logging.getLogger(__name__)

IMAGE_NOT_FOUND = "Imagem não encontrada"
IMAGE_NOT_FOUND_FOR_GAME = "Imagem não encontrada para este jogo"


def _find_game_or_error(catalog, game_id):
    """Resolve ``game_id`` to a game, or to the 400/404 response to return instead."""
    parsed_id = parse_id(game_id)
    if parsed_id is None:
        return None, error_response(INVALID_ID, 400)
    game = catalog.find_game(parsed_id)
    if game is None:
        return None, error_response(GAME_NOT_FOUND, 404)
    return game, None


def _read_upload():
    form = ImageForm()
    if not form.validate():
        return None, error_response(form.image.errors[0], 400)
    return form.read_image(), None


def upload_image(catalog, game_id):
    try:
        game, error = _find_game_or_error(catalog, game_id)
        if error:
            return error
        data, error = _read_upload()
        if error:
            return error

        image = catalog.attach_image(game, data)
        return jsonify({"message": "Imagem enviada com sucesso", "imageId": image.id}), 200
    except SQLAlchemyError:
        catalog.rollback()
        logger.exception("Error saving image for game %s", game_id)
        return error_response("Erro ao salvar a imagem", 500)


def get_image(catalog, image_id):
    def plain(text, status):
        return Response(text, status=status, mimetype="text/plain")

    try:
        parsed_id = parse_id(image_id)
        image = catalog.find_image(parsed_id) if parsed_id is not None else None
        if image is None or not image.data:
            return plain(IMAGE_NOT_FOUND, 404)
        return Response(image.data, status=200, mimetype=current_app.config["IMAGE_MIMETYPE"])
    except SQLAlchemyError:
        catalog.rollback()
        logger.exception("Error loading image %s", image_id)
        return plain("Erro ao carregar imagem", 500)


def replace_image(catalog, game_id):
    try:
        game, error = _find_game_or_error(catalog, game_id)
        if error:
            return error
        data, error = _read_upload()
        if error:
            return error

        if catalog.replace_game_image(game, data) == 0:
            return error_response(IMAGE_NOT_FOUND_FOR_GAME, 404)
        return jsonify({"message": "Imagem atualizada com sucesso"}), 200
    except SQLAlchemyError:
        catalog.rollback()
        logger.exception("Error updating image for game %s", game_id)
        return error_response("Erro ao atualizar a imagem", 500)


def delete_image(catalog, game_id):
    try:
        game, error = _find_game_or_error(catalog, game_id)
        if error:
            return error

        if catalog.delete_game_image(game) == 0:
            return error_response(IMAGE_NOT_FOUND, 404)
        return jsonify({"message": "Imagem excluída com sucesso"}), 200
    except SQLAlchemyError:
        catalog.rollback()
        logger.exception("Error deleting image for game %s", game_id)
        return error_response("Erro ao excluir a imagem", 500)
