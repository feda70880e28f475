from sqlalchemy.orm import relationship
from smartlearn.models import db, utcnow


class LearningPath(db.Model):
    __tablename__ = "learning_paths"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    progress = db.Column(db.Float, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="learning_paths")
    lessons = relationship(
        "PathLesson",
        back_populates="path",
        cascade="all, delete-orphan",
        order_by="PathLesson.lesson_number",
    )

    @classmethod
    def owned_by(cls, path_id, user_id):
        """Return the path only when it belongs to ``user_id``."""
        return cls.query.filter_by(id=path_id, user_id=user_id).first()

    def get_lesson(self, lesson_number):
        for lesson in self.lessons:
            if lesson.lesson_number == lesson_number:
                return lesson
        return None

    def __repr__(self):
        return f"<LearningPath {self.title} (User ID {self.user_id})>"

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description if self.description is not None else "",
            "progress": self.progress,
            "lessons": [lesson.to_dict() for lesson in self.lessons],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class PathLesson(db.Model):
    """A lesson embedded in its learning path; addressed by its 1-based number."""
    __tablename__ = "path_lessons"

    id = db.Column(db.Integer, primary_key=True)
    path_id = db.Column(db.Integer, db.ForeignKey("learning_paths.id"), nullable=False)
    lesson_number = db.Column(db.Integer, nullable=False)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False, default="")
    completed = db.Column(db.Boolean, nullable=False, default=False)
    has_quiz = db.Column(db.Boolean, nullable=False, default=True)
    completed_at = db.Column(db.DateTime, nullable=True)

    path = relationship("LearningPath", back_populates="lessons")

    __table_args__ = (
        db.UniqueConstraint("path_id", "lesson_number", name="unique_path_lesson_number"),
    )

    def __repr__(self):
        return f"<PathLesson {self.lesson_number}: {self.title}>"

    def to_dict(self):
        return {
            "id": self.lesson_number,
            "title": self.title,
            "content": self.content,
            "completed": self.completed,
            "has_quiz": self.has_quiz,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
