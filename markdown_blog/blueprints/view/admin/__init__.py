from __future__ import annotations

# Import routes to register them with the existing admin blueprint
# Each module imports `bp` from markdown_blog.blueprints.admin
from markdown_blog.blueprints.view.admin import post  # noqa: E402,F401
