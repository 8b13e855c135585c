from __future__ import annotations

# Import all models so Flask-Migrate sees them
from markdown_blog.models.post import Post

__all__ = [
    "Post",
]
