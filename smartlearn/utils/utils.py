import logging
from functools import wraps
from flask import jsonify, g, request, session
from smartlearn.models import db, User

logger = logging.getLogger(__name__)


def current_user():
    """Load the user stored in the server-side session, if any."""
    user_id = session.get("user_id")
    if user_id is None:
        return None
    return db.session.get(User, user_id)


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user = current_user()
        if user is None:
            if "user_id" in session:
                logger.info("Session refers to missing user %s; clearing it", session.get("user_id"))
                session.clear()
            return jsonify({"error": "Unauthorized. Please login."}), 401

        g.user = user
        return f(*args, **kwargs)

    return decorated_function


def json_body():
    """The request's JSON object; {} for a missing or unparseable body, None for any other JSON type."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None
