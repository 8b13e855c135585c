from __future__ import annotations

# Re-export common schema classes for convenient imports
from .posts import (  # noqa: F401
    ActionErrors,
    DeletePostAction,
    InvalidActionError,
    PostAction,
    PostFields,
    UpdatePostAction,
    parse_post_action,
    parse_post_fields,
)

__all__ = [
    "ActionErrors",
    "DeletePostAction",
    "InvalidActionError",
    "PostAction",
    "PostFields",
    "UpdatePostAction",
    "parse_post_action",
    "parse_post_fields",
]
