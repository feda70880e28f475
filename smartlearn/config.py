import os
from datetime import timedelta
from urllib.parse import urlparse
from sqlalchemy.pool import QueuePool
from cachelib import SimpleCache


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'change_this_secret_key')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        "poolclass": QueuePool,
        "pool_size": 5,
        "max_overflow": 2,
        "pool_timeout": 10
    }

    # Request bodies are capped at 10 MB
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    SESSION_TYPE = 'filesystem'
    SESSION_FILE_DIR = os.getenv("SESSION_FILE_DIR", os.path.join(os.getcwd(), "flask_session"))
    SESSION_PERMANENT = True
    SESSION_USE_SIGNER = True
    SESSION_COOKIE_SECURE = os.getenv('FLASK_ENV', 'production').lower() == 'production'
    SESSION_COOKIE_PATH = "/"
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

    GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
    GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
    GOOGLE_REDIRECT_URI = os.getenv("GOOGLE_REDIRECT_URI")

    ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
    LLM_MODEL = os.getenv("LLM_MODEL", "claude-sonnet-4-20250514")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevConfig(Config):
    """Development Configuration"""
    DEBUG = True
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', 'sqlite:///smartlearn.db')
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestConfig(Config):
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SESSION_TYPE = 'cachelib'
    SESSION_CACHELIB = SimpleCache()
    SESSION_COOKIE_SECURE = False
    SECRET_KEY = 'test-secret-key'
    FRONTEND_URL = "http://localhost:3000"
    GOOGLE_CLIENT_ID = "test-client-id"
    GOOGLE_CLIENT_SECRET = "test-client-secret"
    GOOGLE_REDIRECT_URI = "http://localhost/api/auth/google/callback"
    ANTHROPIC_API_KEY = "test-anthropic-key"


class ProdConfig(Config):
    """Production Configuration"""
    DEBUG = False

    raw_db_url = os.getenv('DATABASE_URL')

    if raw_db_url:
        if raw_db_url.startswith("mysql://"):
            raw_db_url = raw_db_url.replace("mysql://", "mysql+pymysql://", 1)

        parsed_url = urlparse(raw_db_url)
        SQLALCHEMY_DATABASE_URI = f"{parsed_url.scheme}://{parsed_url.netloc}{parsed_url.path}"
    else:
        SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', 'sqlite:///smartlearn.db')
        SQLALCHEMY_ENGINE_OPTIONS = {}


config_dict = {
    "development": DevConfig,
    "testing": TestConfig,
    "production": ProdConfig
}


def get_config(env=None):
    env = (env or os.getenv('FLASK_ENV', 'production')).lower()
    return config_dict.get(env, ProdConfig)
