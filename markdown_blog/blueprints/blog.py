from __future__ import annotations

from flask import Blueprint

bp = Blueprint("blog", __name__)

import markdown_blog.blueprints.view.user.post  # noqa: E402,F401
