from datetime import datetime, timezone
from flask_sqlalchemy import SQLAlchemy

# Initialize SQLAlchemy
db = SQLAlchemy()


def utcnow():
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# Import models
from smartlearn.models.users import User
from smartlearn.models.learning_paths import LearningPath, PathLesson
from smartlearn.models.quiz_results import QuizResult
