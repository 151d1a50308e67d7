from flask import jsonify

INVALID_ID = "ID inválido"
GAME_NOT_FOUND = "Jogo não encontrado"


def parse_id(value):
    """Return ``value`` as an int, or None unless it is an integer with an optional leading ``-``."""
    digits = value[1:] if value and value.startswith("-") else value
    if not digits or not str.isnumeric(digits) or not digits.isascii():
        return None
    return int(value)


def error_response(message, status):
    return jsonify({"error": message}), status
