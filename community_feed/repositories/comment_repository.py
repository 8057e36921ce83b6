import uuid

from sqlalchemy import func

from community_feed.db import db
from community_feed.models.comment_model import Comment


def create_comment(post_id, user, text, created_at):
    comment = Comment(
        id=str(uuid.uuid4()),
        post_id=post_id,
        user=user,
        text=text,
        created_at=created_at
    )

    db.session.add(comment)
    return comment


def get_comments_by_post(post_id, limit, offset):
    return (
        Comment.query
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def count_comments(post_id):
    return (
        db.session.query(func.count(Comment.id))
        .filter(Comment.post_id == post_id)
        .scalar()
    ) or 0


def count_comments_for_posts(post_ids):
    counts = {post_id: 0 for post_id in post_ids}
    if not post_ids:
        return counts

    rows = (
        db.session.query(Comment.post_id, func.count(Comment.id))
        .filter(Comment.post_id.in_(post_ids))
        .group_by(Comment.post_id)
        .all()
    )
    for post_id, count in rows:
        counts[post_id] = count
    return counts


def delete_comments_by_post(post_id):
    return Comment.query.filter_by(post_id=post_id).delete(synchronize_session=False)
