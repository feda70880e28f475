from smartlearn.models import db, utcnow


class QuizResult(db.Model):
    __tablename__ = "quiz_results"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    path_id = db.Column(db.Integer, db.ForeignKey("learning_paths.id"), nullable=False)
    lesson_id = db.Column(db.Integer, nullable=False)
    score = db.Column(db.Integer, nullable=False)
    answers = db.Column(db.JSON, nullable=False, default=list)
    completed_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    user = db.relationship("User", back_populates="quiz_results")
    path = db.relationship("LearningPath")

    def __repr__(self):
        return f"<QuizResult {self.score} (Path ID {self.path_id}, Lesson {self.lesson_id})>"

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "path_id": self.path_id,
            "lesson_id": self.lesson_id,
            "score": self.score,
            "answers": self.answers,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
