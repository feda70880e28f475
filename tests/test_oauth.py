import pytest
import requests

from smartlearn.utils import oauth
from smartlearn.utils.oauth import OAuthError


class _Response:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(response=self)


@pytest.fixture
def request_context(app):
    with app.test_request_context():
        yield


def test_exchange_code_posts_to_token_endpoint(request_context, monkeypatch):
    calls = {}

    def fake_post(url, data, auth, headers, timeout):
        calls.update(url=url, data=data, auth=auth)
        return _Response(200, {"access_token": "abc", "token_type": "Bearer"})

    monkeypatch.setattr(oauth.requests, "post", fake_post)

    assert oauth.exchange_code("the-code") == "abc"
    assert calls["url"] == oauth.TOKEN_URL
    assert calls["data"]["code"] == "the-code"
    assert calls["data"]["grant_type"] == "authorization_code"
    assert calls["auth"] == ("test-client-id", "test-client-secret")


@pytest.mark.parametrize("response", [
    _Response(400, {"error": "invalid_grant"}),
    _Response(200, {"token_type": "Bearer"}),
])
def test_exchange_code_failures(request_context, monkeypatch, response):
    monkeypatch.setattr(oauth.requests, "post", lambda *args, **kwargs: response)
    with pytest.raises(OAuthError):
        oauth.exchange_code("the-code")


def test_exchange_code_network_error(request_context, monkeypatch):
    def fail(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(oauth.requests, "post", fail)
    with pytest.raises(OAuthError):
        oauth.exchange_code("the-code")


def test_fetch_profile_sends_bearer_token(request_context, monkeypatch):
    seen = {}

    def fake_get(url, headers, timeout):
        seen.update(url=url, headers=headers)
        return _Response(200, {"sub": "1", "email": "a@example.com", "name": "A"})

    monkeypatch.setattr(oauth.requests, "get", fake_get)

    assert oauth.fetch_profile("tok")["email"] == "a@example.com"
    assert seen["url"] == oauth.USERINFO_URL
    assert seen["headers"] == {"Authorization": "Bearer tok"}


def test_fetch_profile_requires_id_and_email(request_context, monkeypatch):
    monkeypatch.setattr(oauth.requests, "get", lambda *args, **kwargs: _Response(200, {"sub": "1"}))
    with pytest.raises(OAuthError):
        oauth.fetch_profile("tok")


def test_redirect_uri_falls_back_to_callback_route(app, request_context):
    app.config["GOOGLE_REDIRECT_URI"] = None
    assert oauth.get_redirect_uri() == "http://localhost/api/auth/google/callback"
