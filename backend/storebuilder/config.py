import os
from dotenv import load_dotenv

load_dotenv()


def _storage_timeout() -> float:
    return float(os.getenv("STORAGE_TIMEOUT_SECONDS", "5"))


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Upper bound for a single storage round-trip. A timeout is reported
    # like any other storage failure.
    STORAGE_TIMEOUT_SECONDS = _storage_timeout()
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_timeout": _storage_timeout(),
    }


class PostgresTimeoutMixin:
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_timeout": _storage_timeout(),
        "connect_args": {
            "connect_timeout": int(_storage_timeout()),
            "options": f"-c statement_timeout={int(_storage_timeout() * 1000)}",
        },
    }


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///storebuilder-dev.db")


class ProductionConfig(PostgresTimeoutMixin, BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    JWT_SECRET_KEY = SECRET_KEY
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
