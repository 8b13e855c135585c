# Import all repository functions to maintain a single import point
from markdown_blog.repositories.posts import (
    get_post,
    list_posts,
    create_post,
    update_post,
    delete_post,
)

__all__ = [
    "get_post",
    "list_posts",
    "create_post",
    "update_post",
    "delete_post",
]
