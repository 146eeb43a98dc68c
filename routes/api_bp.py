from flask import Blueprint, request, jsonify, current_app
import sqlite3
import uuid
import database
from moderation import validate_chirp, ValidationError

api_bp = Blueprint('api', __name__)


# --- HELPER FUNCTIONS ---

def decode_params(*fields):
    """
    Pulls the named string fields out of the JSON body.
    Returns None when the body isn't a JSON object, a field is missing, or a
    field carries a lone surrogate escape ("\\ud800") that has no UTF-8 form,
    so the caller can answer with a 400.
    """
    # force=True: clients don't always send a JSON content type
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return None
    values = []
    for field in fields:
        value = data.get(field)
        if not isinstance(value, str):
            return None
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return None
        values.append(value)
    return values


def respond_with_error(code, message):
    return jsonify({"error": message}), code


def _moderate(body):
    return validate_chirp(body,
                          current_app.config['BANNED_WORDS'],
                          current_app.config['MAX_CHIRP_LENGTH'])


# --- ROUTES ---

@api_bp.route('/healthz', methods=['GET'])
def healthz():
    """Readiness probe."""
    return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}


@api_bp.route('/validate_chirp', methods=['POST'])
def handle_validate_chirp():
    """Checks a chirp without storing it and echoes back the cleaned body."""
    params = decode_params('body')
    if params is None:
        return respond_with_error(400, "Couldn't decode parameters")
    body, = params

    try:
        cleaned = _moderate(body)
    except ValidationError as e:
        return respond_with_error(400, e.message)

    return jsonify({"cleaned_body": cleaned.cleaned_body}), 200


@api_bp.route('/chirps', methods=['POST'])
def handle_create_chirp():
    params = decode_params('body', 'user_id')
    if params is None:
        return respond_with_error(400, "Couldn't decode parameters")
    body, user_id = params

    # Malformed ids are the client's fault; unknown ones fail at the foreign key
    try:
        uuid.UUID(user_id)
    except ValueError:
        return respond_with_error(400, "Couldn't decode parameters")

    # MODERATION GATEKEEPER
    # Too long is rejected outright, banned words are masked before storage.
    try:
        cleaned = _moderate(body)
    except ValidationError as e:
        return respond_with_error(400, e.message)

    try:
        chirp = database.create_chirp(cleaned.cleaned_body, user_id)
    except sqlite3.Error as e:
        current_app.logger.error("Couldn't create chirp for user %s: %s", user_id, e)
        return respond_with_error(500, "Couldn't create chirp")

    return jsonify(chirp), 201


@api_bp.route('/users', methods=['POST'])
def handle_create_user():
    params = decode_params('email')
    if params is None:
        return respond_with_error(400, "Couldn't decode parameters")
    email, = params

    try:
        user = database.create_user(email)
    except sqlite3.Error as e:
        current_app.logger.error("Couldn't create user %s: %s", email, e)
        return respond_with_error(500, "Couldn't create user")

    return jsonify(user), 201
