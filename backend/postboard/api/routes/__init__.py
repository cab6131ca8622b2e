"""Route modules for the Postboard API."""
from . import auth, posts

__all__ = ["auth", "posts"]
