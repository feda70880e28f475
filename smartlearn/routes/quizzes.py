import logging
from flask import Blueprint, jsonify, g
from smartlearn.classes.quiz_grader import QuizGrader
from smartlearn.classes.validators import missing_fields, parse_id, validate_submission
from smartlearn.models import db
from smartlearn.models.learning_paths import LearningPath
from smartlearn.models.quiz_results import QuizResult
from smartlearn.utils import llm_service
from smartlearn.utils.utils import json_body, login_required

logger = logging.getLogger(__name__)

quiz_bp = Blueprint("quiz_bp", __name__)

HISTORY_LIMIT = 20


def _lookup_ids(data):
    """Parse path_id and lesson_id from a request body; None for either when invalid."""
    return parse_id(data.get("path_id")), parse_id(data.get("lesson_id"))


# Generate a quiz for a lesson
@quiz_bp.route("/generate", methods=["POST"])
@login_required
def generate_quiz():
    data = json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400

    if missing_fields(data, ("path_id", "lesson_id", "lesson_title", "lesson_content")):
        return jsonify({"error": "Missing required fields"}), 400

    path_id, lesson_id = _lookup_ids(data)
    if path_id is None or lesson_id is None:
        return jsonify({"error": "path_id and lesson_id must be positive integers"}), 400

    if not LearningPath.owned_by(path_id, g.user.id):
        return jsonify({"error": "Learning path not found"}), 404

    try:
        quiz_data = llm_service.generate_quiz(data["lesson_title"], data["lesson_content"])
    except llm_service.GenerationError:
        logger.exception("Error generating quiz for path %s lesson %s", path_id, lesson_id)
        return jsonify({"error": "Failed to generate quiz"}), 500

    questions = [
        {"id": idx, **question}
        for idx, question in enumerate(quiz_data["questions"], start=1)
    ]

    return jsonify({
        "path_id": path_id,
        "lesson_id": lesson_id,
        "questions": questions,
    }), 200


# Submit quiz answers
@quiz_bp.route("/submit", methods=["POST"])
@login_required
def submit_quiz():
    data = json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400

    if missing_fields(data, ("path_id", "lesson_id", "answers", "questions")):
        return jsonify({"error": "Missing required fields"}), 400

    path_id, lesson_id = _lookup_ids(data)
    if path_id is None or lesson_id is None:
        return jsonify({"error": "path_id and lesson_id must be positive integers"}), 400

    answers = data["answers"]
    questions = data["questions"]
    try:
        validate_submission(answers, questions)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    path = LearningPath.owned_by(path_id, g.user.id)
    if not path:
        return jsonify({"error": "Learning path not found"}), 404
    if not path.get_lesson(lesson_id):
        return jsonify({"error": "Lesson not found"}), 404

    grade = QuizGrader.grade(questions, answers)

    result = QuizResult(
        user_id=g.user.id,
        path_id=path.id,
        lesson_id=lesson_id,
        score=grade["score"],
        answers=grade["answers"],
    )
    db.session.add(result)
    db.session.commit()

    return jsonify({
        "score": grade["score"],
        "correct_count": grade["correct_count"],
        "total_questions": grade["total_questions"],
        "result_id": result.id,
    }), 201


# Fetch recent quiz results
@quiz_bp.route("/history", methods=["GET"])
@login_required
def get_quiz_history():
    results = (
        QuizResult.query.filter_by(user_id=g.user.id)
        .order_by(QuizResult.completed_at.desc(), QuizResult.id.desc())
        .limit(HISTORY_LIMIT)
        .all()
    )
    return jsonify([result.to_dict() for result in results]), 200
