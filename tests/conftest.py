import json
from urllib.parse import parse_qs, urlparse

import pytest

from smartlearn.app import create_app
from smartlearn.models import db as _db
from smartlearn.routes import authentication
from smartlearn.utils import llm_service

ADA = {
    "sub": "google-ada",
    "email": "ada@example.com",
    "name": "Ada Lovelace",
    "picture": "https://example.com/ada.png",
}
BOB = {
    "sub": "google-bob",
    "email": "bob@example.com",
    "name": "Bob Builder",
    "picture": None,
}

PYTHON_BASICS = {
    "title": "Python Basics",
    "description": "Start programming with Python.",
    "lessons": [
        {"title": "Installing Python", "content": "Download the interpreter."},
        {"title": "Variables", "content": "Names bound to values."},
        {"title": "Control Flow", "content": "if, for and while."},
        {"title": "Functions", "content": "def and return."},
        {"title": "Modules", "content": "import and packages."},
    ],
}

QUIZ = {
    "questions": [
        {"question": f"Question {n}?", "options": ["A", "B", "C", "D"], "correct": n % 4}
        for n in range(5)
    ]
}


def model_reply(payload):
    return f"Sure! Here is what you asked for:\n{json.dumps(payload, indent=2)}\nGood luck!"


class FakeModel:
    """Stands in for llm_service.complete; records prompts and replays a canned reply."""

    def __init__(self):
        self.reply = model_reply(PYTHON_BASICS)
        self.prompts = []

    def __call__(self, prompt, max_tokens):
        self.prompts.append((prompt, max_tokens))
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()
    app.config["SESSION_CACHELIB"].clear()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_model(monkeypatch):
    model = FakeModel()
    monkeypatch.setattr(llm_service, "complete", model)
    return model


@pytest.fixture
def login(monkeypatch):
    """Drive the real OAuth routes with the provider calls stubbed out."""

    def _login(test_client, profile=ADA):
        monkeypatch.setattr(authentication, "exchange_code", lambda code: "access-token")
        monkeypatch.setattr(authentication, "fetch_profile", lambda token: dict(profile))

        start = test_client.get("/api/auth/google")
        state = parse_qs(urlparse(start.headers["Location"]).query)["state"][0]
        return test_client.get(
            "/api/auth/google/callback", query_string={"code": "auth-code", "state": state}
        )

    return _login


@pytest.fixture
def auth_client(app, login):
    test_client = app.test_client()
    login(test_client, ADA)
    return test_client


@pytest.fixture
def other_client(app, login):
    test_client = app.test_client()
    login(test_client, BOB)
    return test_client


@pytest.fixture
def learning_path(auth_client, fake_model):
    fake_model.reply = model_reply(PYTHON_BASICS)
    response = auth_client.post("/api/learning-paths/generate", json={"topic": "Python basics"})
    assert response.status_code == 201
    return response.get_json()
