# config.py
import os
from dotenv import load_dotenv

load_dotenv()

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
JWT_SECRET = os.getenv("JWT_SECRET", "jwt-secret-please-change-this-before-deploying")
JWT_ALGO = "HS256"
JWT_EXPIRES_IN = int(os.getenv("JWT_EXPIRES_IN", 7 * 24 * 3600))  # seconds

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///alumni_portal.db")
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

APP_ENV = os.getenv("APP_ENV", "production")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def as_flask_config():
    return {
        "SECRET_KEY": SECRET_KEY,
        "JWT_SECRET": JWT_SECRET,
        "JWT_ALGO": JWT_ALGO,
        "JWT_EXPIRES_IN": JWT_EXPIRES_IN,
        "SQLALCHEMY_DATABASE_URI": DATABASE_URL,
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "FRONTEND_URL": FRONTEND_URL,
        "APP_ENV": APP_ENV,
        "LOG_LEVEL": LOG_LEVEL,
    }
