from community_feed.db import db
from community_feed.models.post_model import Post


def create_post(post_id, author, text, community, created_at):
    post = Post(
        id=post_id,
        author=author,
        text=text,
        community=community,
        created_at=created_at
    )
    db.session.add(post)
    db.session.flush()

    return post


def get_post(post_id):
    return db.session.get(Post, post_id)


def get_posts_page(limit, offset):
    return (
        Post.query
        .order_by(Post.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def delete_post(post_id):
    return Post.query.filter_by(id=post_id).delete(synchronize_session=False)
