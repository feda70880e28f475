"""View-state machine for the learning UI.

The UI moves between four views: dashboard -> path -> quiz -> results. Every
transition waits for the server; local state only ever mirrors responses.
"""
import logging
from contextlib import contextmanager
from smartlearn.frontend.api_client import ApiClient, ApiError

logger = logging.getLogger(__name__)


class View:
    DASHBOARD = "dashboard"
    PATH = "path"
    QUIZ = "quiz"
    RESULTS = "results"


class LearningApp:
    def __init__(self, api=None):
        self.api = api or ApiClient()
        self._reset()

    def _reset(self):
        self.user = None
        self.view = View.DASHBOARD
        self.learning_paths = []
        self.active_path = None
        self.current_lesson = None
        self.quiz = None
        self.quiz_answers = {}
        self.quiz_result = None
        self.stats = None
        self.loading = False
        self.alert = None

    @contextmanager
    def _busy(self):
        self.loading = True
        try:
            yield
        finally:
            self.loading = False

    def _fail(self, message, error):
        logger.error("%s: %s", message, error)
        self.alert = f"{message}. Please try again."
        return False

    # Auth

    def login_url(self):
        return self.api.login_url()

    def check_auth(self):
        try:
            self.user = self.api.get_current_user()
        except ApiError:
            self.user = None
            return False
        self.refresh_dashboard()
        return True

    def logout(self):
        try:
            self.api.logout()
        except ApiError as e:
            logger.error("Logout error: %s", e)
            return False
        self._reset()
        return True

    # Dashboard

    def refresh_dashboard(self):
        self.fetch_learning_paths()
        self.fetch_stats()

    def fetch_learning_paths(self):
        try:
            self.learning_paths = self.api.list_learning_paths()
        except ApiError as e:
            logger.error("Error fetching paths: %s", e)

    def fetch_stats(self):
        try:
            self.stats = self.api.get_stats()
        except ApiError as e:
            logger.error("Error fetching stats: %s", e)

    def generate_path(self, topic):
        if not topic or not topic.strip():
            return False

        with self._busy():
            try:
                path = self.api.generate_learning_path(topic)
            except ApiError as e:
                return self._fail("Failed to generate learning path", e)

        self.learning_paths = [path] + self.learning_paths
        self.fetch_stats()
        return True

    # Path and lessons

    def open_path(self, path_id):
        with self._busy():
            try:
                self.active_path = self.api.get_learning_path(path_id)
            except ApiError as e:
                return self._fail("Failed to load learning path", e)

        self.current_lesson = None
        self.view = View.PATH
        return True

    def open_lesson(self, lesson_id):
        if self.active_path is None:
            return False
        for lesson in self.active_path["lessons"]:
            if lesson["id"] == lesson_id:
                self.current_lesson = lesson
                return True
        return False

    def complete_lesson(self):
        if self.active_path is None or self.current_lesson is None:
            return False

        with self._busy():
            try:
                updated_path = self.api.complete_lesson(self.active_path["id"], self.current_lesson["id"])
            except ApiError as e:
                return self._fail("Failed to complete lesson", e)

        self.learning_paths = [
            updated_path if path["id"] == updated_path["id"] else path
            for path in self.learning_paths
        ]
        self.active_path = updated_path
        self.fetch_stats()

        if self.current_lesson.get("has_quiz"):
            return self.generate_quiz(self.current_lesson)

        self.view = View.PATH
        return True

    # Quiz

    def generate_quiz(self, lesson):
        with self._busy():
            try:
                quiz = self.api.generate_quiz(self.active_path["id"], lesson)
            except ApiError as e:
                return self._fail("Failed to generate quiz", e)

        self.quiz = quiz
        self.quiz_answers = {}
        self.quiz_result = None
        self.view = View.QUIZ
        return True

    def select_answer(self, question_index, option_index):
        if self.quiz is None or not 0 <= question_index < len(self.quiz["questions"]):
            return False
        self.quiz_answers[str(question_index)] = option_index
        return True

    def submit_quiz(self):
        if self.quiz is None:
            return False

        with self._busy():
            try:
                self.quiz_result = self.api.submit_quiz(
                    self.quiz["path_id"],
                    self.quiz["lesson_id"],
                    dict(self.quiz_answers),
                    self.quiz["questions"],
                )
            except ApiError as e:
                return self._fail("Failed to submit quiz", e)

        self.fetch_stats()
        self.view = View.RESULTS
        return True

    # Navigation

    def back_to_path(self):
        if self.active_path is None:
            return self.back_to_dashboard()
        self.quiz = None
        self.quiz_answers = {}
        self.view = View.PATH
        return True

    def back_to_dashboard(self):
        self.active_path = None
        self.current_lesson = None
        self.quiz = None
        self.quiz_answers = {}
        self.quiz_result = None
        self.view = View.DASHBOARD
        self.fetch_stats()
        return True
