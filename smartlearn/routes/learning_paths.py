import logging
from flask import Blueprint, jsonify, g
from smartlearn.classes.progress_manager import ProgressManager
from smartlearn.models import db
from smartlearn.models.learning_paths import LearningPath, PathLesson
from smartlearn.utils import llm_service
from smartlearn.utils.utils import json_body, login_required

logger = logging.getLogger(__name__)

paths_bp = Blueprint("paths_bp", __name__)


# Generate a learning path
@paths_bp.route("/generate", methods=["POST"])
@login_required
def generate_learning_path():
    data = json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    topic = data.get("topic")

    if not isinstance(topic, str) or not topic.strip():
        return jsonify({"error": "Topic is required"}), 400

    topic = topic.strip()
    try:
        path_data = llm_service.generate_learning_path(topic)
    except llm_service.GenerationError:
        logger.exception("Error generating learning path for topic %r", topic)
        return jsonify({"error": "Failed to generate learning path"}), 500

    learning_path = LearningPath(
        user_id=g.user.id,
        title=path_data["title"],
        description=path_data["description"],
        progress=0,
        lessons=[
            PathLesson(
                lesson_number=idx,
                title=lesson["title"],
                content=lesson["content"],
                completed=False,
                has_quiz=True,
            )
            for idx, lesson in enumerate(path_data["lessons"], start=1)
        ],
    )
    db.session.add(learning_path)
    db.session.commit()

    logger.info("Created learning path %s with %d lessons for user %s",
                learning_path.id, len(learning_path.lessons), g.user.id)
    return jsonify(learning_path.to_dict()), 201


# Fetch the user's learning paths
@paths_bp.route("", methods=["GET"])
@login_required
def get_learning_paths():
    paths = (
        LearningPath.query.filter_by(user_id=g.user.id)
        .order_by(LearningPath.created_at.desc(), LearningPath.id.desc())
        .all()
    )
    return jsonify([path.to_dict() for path in paths]), 200


# Fetch a single learning path
@paths_bp.route("/<int:path_id>", methods=["GET"])
@login_required
def get_learning_path(path_id):
    path = LearningPath.owned_by(path_id, g.user.id)
    if not path:
        return jsonify({"error": "Learning path not found"}), 404

    return jsonify(path.to_dict()), 200


# Mark a lesson as completed
@paths_bp.route("/<int:path_id>/lessons/<int:lesson_id>/complete", methods=["PATCH"])
@login_required
def complete_lesson(path_id, lesson_id):
    path = LearningPath.owned_by(path_id, g.user.id)
    if not path:
        return jsonify({"error": "Learning path not found"}), 404

    lesson = ProgressManager.complete_lesson(path, lesson_id)
    if not lesson:
        return jsonify({"error": "Lesson not found"}), 404

    return jsonify(path.to_dict()), 200
