from smartlearn.models import db, utcnow


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    google_id = db.Column(db.String(255), nullable=False, unique=True)
    email = db.Column(db.String(255), nullable=False, unique=True)
    name = db.Column(db.String(255), nullable=False)
    picture = db.Column(db.String(1024), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    last_login = db.Column(db.DateTime, default=utcnow, nullable=False)

    learning_paths = db.relationship("LearningPath", back_populates="user", cascade="all, delete-orphan")
    quiz_results = db.relationship("QuizResult", back_populates="user", cascade="all, delete-orphan")

    @classmethod
    def from_google_profile(cls, profile):
        """Look up the user behind a Google profile, creating it on first login."""
        user = cls.query.filter_by(google_id=profile["sub"]).first()
        if user is None:
            user = cls(
                google_id=profile["sub"],
                email=profile["email"],
                name=profile.get("name") or profile["email"],
                picture=profile.get("picture"),
            )
            db.session.add(user)
        else:
            user.email = profile["email"]
            user.name = profile.get("name") or user.name
            user.picture = profile.get("picture") or user.picture
            user.last_login = utcnow()
        return user

    def __repr__(self):
        return f"<User {self.email}>"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "picture": self.picture,
        }
