"""Application configuration module."""

import os
from datetime import timedelta


class Config:
    """Base configuration for the Flask application."""

    # Core
    APP_NAME = os.getenv("APP_NAME", "stackhub")
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///app.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
    }
    if not DATABASE_URL.startswith("sqlite"):
        SQLALCHEMY_ENGINE_OPTIONS["pool_timeout"] = int(os.getenv("DATABASE_TIMEOUT", "10"))

    # Tokens
    JWT_SECRET_KEY = os.getenv("JWT_SIGNATURE_KEY", SECRET_KEY)
    JWT_ALGORITHM = "HS256"
    JWT_DECODE_ALGORITHMS = ["HS256"]
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=30)
    JWT_ENCODE_ISSUER = APP_NAME
    JWT_DECODE_ISSUER = APP_NAME
    JWT_TOKEN_LOCATION = ["headers"]

    # Mail
    MAIL_HOST = os.getenv("EMAIL_HOST", "localhost")
    MAIL_PORT = int(os.getenv("EMAIL_PORT", "587"))
    MAIL_USERNAME = os.getenv("EMAIL")
    MAIL_PASSWORD = os.getenv("EMAIL_PASSWORD")
    MAIL_SENDER = os.getenv("EMAIL", "no-reply@localhost")
    MAIL_USE_TLS = os.getenv("EMAIL_USE_TLS", "true").strip().lower() in {"1", "true", "yes"}
    MAIL_TIMEOUT = float(os.getenv("EMAIL_TIMEOUT", "30"))

    # Email verification
    VERIFICATION_SUBJECT = "Email Verification"
    VERIFICATION_CODE_TTL = 10 * 60  # seconds
    VERIFICATION_COOLDOWN = 60  # seconds
    RANDOM_SEED = os.getenv("RANDOM_SEED")

    # Stacks
    STACK_SERIALIZE_WRITES = os.getenv("STACK_SERIALIZE_WRITES", "false").strip().lower() in {
        "1",
        "true",
        "yes",
    }

    # CORS
    _raw_origins = os.getenv("ORIGINS", "*")
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]

    # Rate limiting
    RATE_LIMIT = os.getenv("RATE_LIMIT", "60 per minute")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_KEY_PREFIX = os.getenv("RATELIMIT_KEY_PREFIX", "")
