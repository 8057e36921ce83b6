import uuid

from community_feed.db import db
from community_feed.models.media_model import Media


def add_media(post_id, filename, mime):
    media = Media(
        id=str(uuid.uuid4()),
        post_id=post_id,
        filename=filename,
        mime=mime
    )
    db.session.add(media)
    return media


def get_media_by_post(post_id):
    return Media.query.filter_by(post_id=post_id).all()


def get_media_by_posts(post_ids):
    media_by_post = {post_id: [] for post_id in post_ids}
    if not post_ids:
        return media_by_post

    rows = Media.query.filter(Media.post_id.in_(post_ids)).all()
    for media in rows:
        media_by_post.setdefault(media.post_id, []).append(media)
    return media_by_post


def delete_media_by_post(post_id):
    return Media.query.filter_by(post_id=post_id).delete(synchronize_session=False)
