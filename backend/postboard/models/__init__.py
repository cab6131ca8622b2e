"""Record models persisted in the JSON collections."""
from .post import Comment, Post
from .user import User

__all__ = ["User", "Post", "Comment"]
