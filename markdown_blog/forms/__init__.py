from __future__ import annotations

# Re-export common forms for convenience
from .posts import DeletePostForm, EditPostForm, NewPostForm  # noqa: F401

__all__ = [
    "DeletePostForm",
    "EditPostForm",
    "NewPostForm",
]
