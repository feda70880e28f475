from sqlalchemy import func
from smartlearn.models import db, LearningPath, PathLesson, QuizResult
from smartlearn.utils.helpers import round_half_up


class StatsManager:
    @staticmethod
    def user_stats(user_id):
        """Aggregate path, lesson and quiz figures across all of a user's records."""
        total_paths = LearningPath.query.filter_by(user_id=user_id).count()

        lessons = (
            db.session.query(PathLesson)
            .join(LearningPath, LearningPath.id == PathLesson.path_id)
            .filter(LearningPath.user_id == user_id)
        )
        total_lessons = lessons.count()
        completed_lessons = lessons.filter(PathLesson.completed.is_(True)).count()

        total_quizzes, average_score = (
            db.session.query(func.count(QuizResult.id), func.avg(QuizResult.score))
            .filter(QuizResult.user_id == user_id)
            .one()
        )

        overall_progress = (completed_lessons / total_lessons) * 100 if total_lessons > 0 else 0

        return {
            "total_paths": total_paths,
            "completed_lessons": completed_lessons,
            "total_lessons": total_lessons,
            "overall_progress": round_half_up(overall_progress),
            "average_quiz_score": round_half_up(float(average_score)) if total_quizzes else 0,
            "total_quizzes": total_quizzes,
        }
