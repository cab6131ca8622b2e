"""Service layer for posts, likes and comments."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from postboard.db.store import JsonStore, Record, next_id
from postboard.models.post import Comment, Post
from postboard.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)


class PostNotFoundError(LookupError):
    """Raised when no stored post has the requested id."""


class PostPermissionError(RuntimeError):
    """Raised when the caller's role or ownership does not allow the action."""


def _find_post(records: list[Record], post_id: int) -> Record:
    for record in records:
        if record.get("id") == post_id:
            return record
    raise PostNotFoundError("Post not found")


def list_posts(db: JsonStore) -> list[Record]:
    """Return every stored post as it is on disk, in creation order."""
    return db.posts.read()


def create_post(db: JsonStore, author: TokenClaims, content: str) -> Post:
    if author.is_guest:
        raise PostPermissionError("Guests cannot create posts... Not Allowed")

    with db.posts.update() as records:
        post = Post(
            id=next_id(records),
            user_id=author.id,
            content=content,
            timestamp=datetime.now(timezone.utc),
        )
        records.append(post.model_dump(mode="json", by_alias=True))
    logger.info("User %s created post %s", author.id, post.id)
    return post


def update_post(db: JsonStore, editor: TokenClaims, post_id: int, content: str) -> Record:
    with db.posts.update() as records:
        record = _find_post(records, post_id)
        if record.get("userId") != editor.id and not editor.is_admin:
            raise PostPermissionError("Not authorized")
        record["content"] = content
    logger.info("User %s edited post %s", editor.id, post_id)
    return record


def like_post(db: JsonStore, post_id: int) -> Record:
    # Every call counts; likes are not tracked per user.
    with db.posts.update() as records:
        record = _find_post(records, post_id)
        record["likes"] = record.get("likes", 0) + 1
    logger.debug("Post %s now has %s likes", post_id, record["likes"])
    return record


def add_comment(db: JsonStore, author: TokenClaims, post_id: int, text: str) -> Record:
    if author.is_guest:
        raise PostPermissionError("Guests cannot comment")

    with db.posts.update() as records:
        record = _find_post(records, post_id)
        comment = Comment(user_id=author.id, comment=text)
        record.setdefault("comments", []).append(comment.model_dump(by_alias=True))
    logger.info("User %s commented on post %s", author.id, post_id)
    return record
