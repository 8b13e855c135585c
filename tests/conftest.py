"""Test configuration and fixtures for the markdown blog."""

from datetime import datetime, timezone
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from markdown_blog import create_app
from markdown_blog.extensions import db
from markdown_blog.models import Post


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'WTF_CSRF_ENABLED': False,  # Disable CSRF for testing
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
        'CACHE_TYPE': 'SimpleCache',
        'CACHE_DEFAULT_TIMEOUT': 300,
        'POSTS_PER_PAGE': 10,
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()
        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def test_post(app: Flask) -> Post:
    """Create a test post."""
    post = Post(
        title='My Post',
        slug='my-post',
        markdown='# Hello\n\nThis is the body.',
        created_at=datetime.now(timezone.utc),
    )
    db.session.add(post)
    db.session.commit()
    db.session.refresh(post)
    return post


@pytest.fixture
def make_post(app: Flask):
    """Factory for extra posts in listing tests."""
    def _make(slug: str, title: str | None = None, markdown: str = 'body') -> Post:
        post = Post(title=title or slug.replace('-', ' ').title(), slug=slug, markdown=markdown)
        db.session.add(post)
        db.session.commit()
        return post

    return _make
