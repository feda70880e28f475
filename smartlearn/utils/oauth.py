"""Google OAuth 2.0 authorization-code flow."""
import logging
import requests
from urllib.parse import urlencode
from flask import current_app, url_for

logger = logging.getLogger(__name__)

AUTHORIZATION_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
SCOPES = ("openid", "email", "profile")
REQUEST_TIMEOUT = 10


class OAuthError(Exception):
    """The provider rejected the login or answered with something unusable."""


def get_redirect_uri():
    return current_app.config.get("GOOGLE_REDIRECT_URI") or url_for(
        "auth_bp.google_callback", _external=True
    )


def build_authorization_url(state):
    params = {
        "client_id": current_app.config["GOOGLE_CLIENT_ID"],
        "redirect_uri": get_redirect_uri(),
        "response_type": "code",
        "scope": " ".join(SCOPES),
        "state": state,
        "access_type": "online",
        "prompt": "select_account",
    }
    return f"{AUTHORIZATION_URL}?{urlencode(params)}"


def exchange_code(code):
    """Trade an authorization code for an access token."""
    try:
        response = requests.post(
            TOKEN_URL,
            data={
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": get_redirect_uri(),
            },
            auth=(current_app.config["GOOGLE_CLIENT_ID"], current_app.config["GOOGLE_CLIENT_SECRET"]),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        token = response.json().get("access_token")
    except (requests.RequestException, ValueError) as e:
        raise OAuthError(f"Token exchange failed: {e}") from e

    if not token:
        raise OAuthError("Token response did not contain an access token")
    return token


def fetch_profile(access_token):
    """Return the OpenID profile (sub, email, name, picture) for the token's user."""
    try:
        response = requests.get(
            USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        profile = response.json()
    except (requests.RequestException, ValueError) as e:
        raise OAuthError(f"Profile request failed: {e}") from e

    if not isinstance(profile, dict) or not profile.get("sub") or not profile.get("email"):
        raise OAuthError("Profile is missing the account id or email")
    return profile
