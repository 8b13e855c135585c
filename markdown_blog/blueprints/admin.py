from __future__ import annotations

from flask import Blueprint

bp = Blueprint("admin", __name__)

# Import view routes to register them with the admin blueprint
import markdown_blog.blueprints.view.admin  # noqa: E402,F401
