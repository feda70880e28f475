from smartlearn.models import db, utcnow


class ProgressManager:
    @staticmethod
    def calculate_progress(lessons):
        """Percentage of completed lessons, unrounded; 0 for an empty path."""
        total_lessons = len(lessons)
        completed_lessons = sum(1 for lesson in lessons if lesson.completed)
        return (completed_lessons / total_lessons) * 100 if total_lessons > 0 else 0

    @staticmethod
    def complete_lesson(path, lesson_number):
        """Mark a lesson complete and recompute the path's progress.

        Returns the lesson, or None when the path has no lesson with that number.
        """
        lesson = path.get_lesson(lesson_number)
        if lesson is None:
            return None

        if not lesson.completed:
            lesson.completed = True
            lesson.completed_at = utcnow()

        path.progress = ProgressManager.calculate_progress(path.lessons)
        path.updated_at = utcnow()
        db.session.commit()

        return lesson
