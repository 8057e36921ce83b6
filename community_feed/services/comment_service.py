from community_feed.clock import now_ms
from community_feed.db import db
from community_feed.errors import ValidationError
from community_feed.repositories import comment_repository
from community_feed.schemas.comment_schema import CommentResponseSchema
from community_feed.services.inputs import clamp_pagination, text_or_default


DEFAULT_USER = "anonymous"
EMPTY_TEXT_ERROR = "Texto vazio"


def add_comment(post_id, text, user=None):
    # falsy values of any type are empty; whitespace is kept as sent
    if not text:
        raise ValidationError(EMPTY_TEXT_ERROR)

    comment = comment_repository.create_comment(
        post_id=post_id,
        user=text_or_default(user, DEFAULT_USER),
        text=text_or_default(text, ""),
        created_at=now_ms(),
    )

    db.session.commit()
    return comment


def get_post_comments(post_id, page, limit):
    page, limit = clamp_pagination(page, limit)
    comments = comment_repository.get_comments_by_post(post_id, limit, (page - 1) * limit)

    return {
        "page": page,
        "limit": limit,
        "comments": CommentResponseSchema(many=True).dump(comments),
    }


def get_comments_count(post_id):
    return comment_repository.count_comments(post_id)
