import logging
from dotenv import load_dotenv
load_dotenv()
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from flask_session import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, NotFound
from smartlearn.config import get_config
from smartlearn.models import db, utcnow
from smartlearn.routes.authentication import auth_bp
from smartlearn.routes.learning_paths import paths_bp
from smartlearn.routes.quizzes import quiz_bp
from smartlearn.routes.stats import stats_bp

logger = logging.getLogger(__name__)

migrate = Migrate()

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; style-src 'self' 'unsafe-inline'; "
        "script-src 'self'; img-src 'self' data: https:"
    ),
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    if not app.testing:
        logging.basicConfig(
            level=app.config["LOG_LEVEL"],
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    CORS(app, resources={r"/api/*": {"origins": app.config["FRONTEND_URL"]}}, supports_credentials=True)

    db.init_app(app)
    migrate.init_app(app, db)
    Session(app)

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(paths_bp, url_prefix='/api/learning-paths')
    app.register_blueprint(quiz_bp, url_prefix='/api/quizzes')
    app.register_blueprint(stats_bp, url_prefix='/api/stats')

    @app.route('/api/health')
    def health():
        try:
            db.session.execute(text("SELECT 1"))
            database = "connected"
        except SQLAlchemyError:
            logger.exception("Database health check failed")
            db.session.rollback()
            database = "disconnected"

        return jsonify({
            "status": "ok",
            "timestamp": utcnow().isoformat() + "Z",
            "database": database,
            "environment": "development" if app.debug else ("testing" if app.testing else "production"),
        }), 200

    @app.after_request
    def add_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if isinstance(e, NotFound):
            return jsonify({"error": "Route not found"}), 404
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error: %s", e)
        db.session.rollback()
        message = str(e) if app.debug else "Internal server error"
        return jsonify({"error": message}), 500

    logger.info("SmartLearn started (debug=%s, testing=%s)", app.debug, app.testing)
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config['DEBUG'])
