import logging
import secrets
from flask import Blueprint, request, jsonify, redirect, session, current_app, g
from smartlearn.models import db
from smartlearn.models.users import User
from smartlearn.utils.oauth import OAuthError, build_authorization_url, exchange_code, fetch_profile
from smartlearn.utils.utils import login_required

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth_bp', __name__)


def _login_failed(reason):
    logger.warning("Google login failed: %s", reason)
    session.pop("oauth_state", None)
    return redirect(f"{current_app.config['FRONTEND_URL']}/login?error=oauth_failed")


# Start Google OAuth
@auth_bp.route('/google', methods=['GET'])
def google_login():
    state = secrets.token_urlsafe(32)
    session["oauth_state"] = state
    return redirect(build_authorization_url(state))


# Google OAuth callback
@auth_bp.route('/google/callback', methods=['GET'])
def google_callback():
    if request.args.get("error"):
        return _login_failed(f"provider returned {request.args.get('error')}")

    expected_state = session.get("oauth_state")
    if not expected_state or request.args.get("state") != expected_state:
        return _login_failed("state mismatch")

    code = request.args.get("code")
    if not code:
        return _login_failed("missing authorization code")

    try:
        profile = fetch_profile(exchange_code(code))
    except OAuthError as e:
        return _login_failed(str(e))

    user = User.from_google_profile(profile)
    db.session.commit()

    # A fresh session id on every login
    session.clear()
    session["user_id"] = user.id
    session.permanent = True
    current_app.session_interface.regenerate(session)

    logger.info("User %s logged in", user.id)
    return redirect(current_app.config["FRONTEND_URL"])


# Current user
@auth_bp.route('/user', methods=['GET'])
@login_required
def get_current_user():
    return jsonify(g.user.to_dict()), 200


# Logout
@auth_bp.route('/logout', methods=['POST'])
def logout():
    user_id = session.get("user_id")
    session.clear()
    if user_id is not None:
        logger.info("User %s logged out", user_id)
    return jsonify({"message": "Logged out successfully"}), 200
