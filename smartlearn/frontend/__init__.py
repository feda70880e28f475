from smartlearn.frontend.api_client import ApiClient, ApiError
from smartlearn.frontend.app_state import LearningApp, View
