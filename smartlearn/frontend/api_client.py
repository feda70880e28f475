import requests

DEFAULT_API_URL = "http://localhost:5000/api"
REQUEST_TIMEOUT = 120


class ApiError(Exception):
    def __init__(self, status_code, message):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ApiClient:
    """Thin wrapper over the REST API; the session keeps the login cookie."""

    def __init__(self, base_url=DEFAULT_API_URL, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _request(self, method, path, json=None):
        try:
            response = self.session.request(
                method, f"{self.base_url}{path}", json=json, timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            raise ApiError(None, str(e)) from e

        if response.status_code >= 400:
            try:
                message = response.json().get("error", response.reason)
            except ValueError:
                message = response.reason
            raise ApiError(response.status_code, message)
        return response.json()

    def login_url(self):
        return f"{self.base_url}/auth/google"

    def get_current_user(self):
        return self._request("GET", "/auth/user")

    def logout(self):
        return self._request("POST", "/auth/logout")

    def list_learning_paths(self):
        return self._request("GET", "/learning-paths")

    def get_learning_path(self, path_id):
        return self._request("GET", f"/learning-paths/{path_id}")

    def generate_learning_path(self, topic):
        return self._request("POST", "/learning-paths/generate", json={"topic": topic})

    def complete_lesson(self, path_id, lesson_id):
        return self._request("PATCH", f"/learning-paths/{path_id}/lessons/{lesson_id}/complete")

    def generate_quiz(self, path_id, lesson):
        return self._request("POST", "/quizzes/generate", json={
            "path_id": path_id,
            "lesson_id": lesson["id"],
            "lesson_title": lesson["title"],
            "lesson_content": lesson["content"],
        })

    def submit_quiz(self, path_id, lesson_id, answers, questions):
        return self._request("POST", "/quizzes/submit", json={
            "path_id": path_id,
            "lesson_id": lesson_id,
            "answers": answers,
            "questions": questions,
        })

    def get_quiz_history(self):
        return self._request("GET", "/quizzes/history")

    def get_stats(self):
        return self._request("GET", "/stats")
