from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env if present
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


class Config:
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.urandom(32).hex())

    SITE_NAME = os.getenv("SITE_NAME", "Markdown Blog")

    # Database
    # Read from environment and then unset so it does not leak into subprocesses
    SQLALCHEMY_DATABASE_URI: str = os.environ.pop("DATABASE_URL", "sqlite:///markdown_blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Sessions (flash messages only)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.getenv("FLASK_ENV", "production") == "production"
    SESSION_COOKIE_SAMESITE = "Strict"

    # Request body limit; markdown bodies are plain text
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(1024 * 1024)))

    # Pagination
    POSTS_PER_PAGE = int(os.getenv("POSTS_PER_PAGE", "10"))

    # Caching of rendered post HTML
    CACHE_TYPE = os.getenv("CACHE_TYPE", "SimpleCache")
    CACHE_DEFAULT_TIMEOUT = int(os.getenv("CACHE_DEFAULT_TIMEOUT", "300"))

    # Rate limiting
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per minute")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    ADMIN_WRITE_RATE_LIMIT = os.getenv("ADMIN_WRITE_RATE_LIMIT", "30 per minute; 300 per hour")

    # Security headers
    # Use {nonce} placeholder for per-request nonce substitution in security.apply_security_headers
    SECURITY_CSP = (
        "default-src 'self'; "
        "script-src 'nonce-{nonce}' 'strict-dynamic' ;"
        "style-src 'self'; "
        "img-src 'self'; "
        "font-src 'self'; "
        "object-src 'none'; "
        "base-uri 'self'; "
        "frame-ancestors 'none'"
    )
    SECURITY_HSTS_SECONDS = 31536000
    SECURITY_PERMISSIONS_POLICY = (
        "geolocation=(), microphone=(), camera=(), payment=(), usb=(), "
        "magnetometer=(), gyroscope=(), accelerometer=()"
    )

    # Flask env
    ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = ENV != "production"
