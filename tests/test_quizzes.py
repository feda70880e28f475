import pytest

from smartlearn.models import QuizResult, db
from tests.conftest import QUIZ, model_reply

QUESTIONS = [
    {"id": n + 1, "question": f"Q{n}?", "options": ["A", "B", "C", "D"], "correct": n % 4}
    for n in range(5)
]


def _quiz_request(path, lesson_id=1):
    lesson = path["lessons"][lesson_id - 1]
    return {
        "path_id": path["id"],
        "lesson_id": lesson["id"],
        "lesson_title": lesson["title"],
        "lesson_content": lesson["content"],
    }


def _submission(path, answers, questions=QUESTIONS, lesson_id=1):
    return {"path_id": path["id"], "lesson_id": lesson_id, "answers": answers, "questions": questions}


def test_generate_quiz_numbers_questions(auth_client, learning_path, fake_model):
    fake_model.reply = model_reply(QUIZ)

    response = auth_client.post("/api/quizzes/generate", json=_quiz_request(learning_path, 2))

    assert response.status_code == 200
    quiz = response.get_json()
    assert quiz["path_id"] == learning_path["id"]
    assert quiz["lesson_id"] == 2
    assert [q["id"] for q in quiz["questions"]] == [1, 2, 3, 4, 5]
    assert quiz["questions"][1]["correct"] == QUIZ["questions"][1]["correct"]
    assert "Title: Variables" in fake_model.prompts[-1][0]
    assert QuizResult.query.count() == 0


@pytest.mark.parametrize("field", ["path_id", "lesson_id", "lesson_title", "lesson_content"])
def test_generate_quiz_requires_fields(auth_client, learning_path, fake_model, field):
    body = _quiz_request(learning_path)
    body[field] = ""
    calls_before = len(fake_model.prompts)

    response = auth_client.post("/api/quizzes/generate", json=body)

    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing required fields"}
    assert len(fake_model.prompts) == calls_before


def test_generate_quiz_for_foreign_path_is_404(other_client, learning_path, fake_model):
    fake_model.reply = model_reply(QUIZ)
    response = other_client.post("/api/quizzes/generate", json=_quiz_request(learning_path))
    assert response.status_code == 404


def test_generate_quiz_failure_is_500(auth_client, learning_path, fake_model):
    fake_model.reply = model_reply({"questions": [{"question": "Q?", "options": ["A"], "correct": 3}]})

    response = auth_client.post("/api/quizzes/generate", json=_quiz_request(learning_path))

    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to generate quiz"}


@pytest.mark.parametrize("answers, correct_count, score", [
    ([0, 1, 2, 3, 0], 5, 100),
    ([0, 1, 2, 3, 1], 4, 80),
    ([3, 3, 3, 3, 3], 1, 20),
    ([1, 2, 3, 0, 1], 0, 0),
    ([0, 1], 2, 40),
])
def test_submit_scores_by_position(auth_client, learning_path, answers, correct_count, score):
    response = auth_client.post("/api/quizzes/submit", json=_submission(learning_path, answers))

    assert response.status_code == 201
    body = response.get_json()
    assert body["score"] == score
    assert body["correct_count"] == correct_count
    assert body["total_questions"] == 5

    result = db.session.get(QuizResult, body["result_id"])
    assert result.score == score
    assert result.lesson_id == 1
    assert len(result.answers) == 5


def test_submit_accepts_answers_keyed_by_index(auth_client, learning_path):
    answers = {"0": 0, "2": 2, "4": 1}

    body = auth_client.post("/api/quizzes/submit", json=_submission(learning_path, answers)).get_json()

    assert body["correct_count"] == 2
    assert body["score"] == 40
    assert db.session.get(QuizResult, body["result_id"]).answers == [0, None, 2, None, 1]


def test_submit_rounds_half_up(auth_client, learning_path):
    questions = [{"question": f"Q{n}", "options": ["A", "B"], "correct": 0} for n in range(8)]
    answers = [0, 1, 1, 1, 1, 1, 1, 1]

    body = auth_client.post("/api/quizzes/submit", json=_submission(learning_path, answers, questions)).get_json()

    assert body["score"] == 13


@pytest.mark.parametrize("field", ["path_id", "lesson_id", "answers", "questions"])
def test_submit_requires_fields(auth_client, learning_path, field):
    body = _submission(learning_path, [0, 1, 2, 3, 0])
    del body[field]

    response = auth_client.post("/api/quizzes/submit", json=body)

    assert response.status_code == 400
    assert QuizResult.query.count() == 0


@pytest.mark.parametrize("answers, questions", [
    ([0], []),
    ([0], "not a list"),
    ([0], [1, 2, 3]),
    ("0,1,2", QUESTIONS),
])
def test_submit_rejects_malformed_payload(auth_client, learning_path, answers, questions):
    response = auth_client.post("/api/quizzes/submit", json=_submission(learning_path, answers, questions))
    assert response.status_code == 400
    assert QuizResult.query.count() == 0


@pytest.mark.parametrize("url", ["/api/quizzes/generate", "/api/quizzes/submit"])
def test_quiz_endpoints_reject_json_array_body(auth_client, learning_path, fake_model, url):
    fake_model.prompts.clear()

    response = auth_client.post(url, json=[1, 2])

    assert response.status_code == 400
    assert response.get_json() == {"error": "Request body must be a JSON object"}
    assert fake_model.prompts == []
    assert QuizResult.query.count() == 0


def test_submit_for_foreign_path_is_404(other_client, learning_path):
    response = other_client.post("/api/quizzes/submit", json=_submission(learning_path, [0, 1, 2, 3, 0]))
    assert response.status_code == 404
    assert QuizResult.query.count() == 0


def test_submit_for_missing_lesson_is_404(auth_client, learning_path):
    response = auth_client.post("/api/quizzes/submit", json=_submission(learning_path, [0], lesson_id=9))
    assert response.status_code == 404
    assert response.get_json() == {"error": "Lesson not found"}


def test_history_returns_latest_twenty(auth_client, other_client, learning_path):
    for n in range(25):
        answers = [0, 1, 2, 3, 0] if n % 2 else [1, 1, 1, 1, 1]
        auth_client.post("/api/quizzes/submit", json=_submission(learning_path, answers, lesson_id=(n % 5) + 1))

    response = auth_client.get("/api/quizzes/history")

    assert response.status_code == 200
    history = response.get_json()
    assert len(history) == 20
    ids = [result["id"] for result in history]
    assert ids == sorted(ids, reverse=True)
    assert history[0]["lesson_id"] == 5
    assert history[0]["score"] == 20
    assert other_client.get("/api/quizzes/history").get_json() == []
