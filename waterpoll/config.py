import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # project root (where wsgi.py is)
load_dotenv(BASE_DIR / ".env")

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'water_poll.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Browser-side "already voted" hint; never checked when recording a vote
    HAS_VOTED_COOKIE = os.getenv("HAS_VOTED_COOKIE", "has_voted")
    HAS_VOTED_COOKIE_MAX_AGE = int(os.getenv("HAS_VOTED_COOKIE_MAX_AGE", str(60 * 60 * 24 * 365)))

    SWAGGER = {"title": "Water Situation Poll API", "uiversion": 3}


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_LEVEL = "DEBUG"
