import uuid

from flask import current_app

from community_feed.clock import now_ms
from community_feed.db import db
from community_feed.errors import NotFoundError, ValidationError
from community_feed.extensions.attachment_store import AttachmentStore, get_attachment_store
from community_feed.repositories import comment_repository, media_repository
from community_feed.repositories import post_repository, reaction_repository
from community_feed.schemas.post_schema import FeedPostSchema, PostDetailSchema, PostSchema
from community_feed.services.inputs import clamp_pagination, text_or_default


DEFAULT_AUTHOR = "Anônimo"

_post_schema = PostSchema()
_post_detail_schema = PostDetailSchema()
_feed_post_schema = FeedPostSchema(many=True)


def _serialize_media(media):
    return {
        "url": AttachmentStore.url_for(media.filename),
        "mime": media.mime,
    }


def _post_fields(post):
    return {
        "id": post.id,
        "author": post.author,
        "text": post.text,
        "community": post.community,
        "created_at": post.created_at,
    }


def _uploaded_files(files):
    # an empty <input type="file"> still sends a part with no filename
    return [file for file in files or [] if file and getattr(file, "filename", "")]


def create_post_with_media(text=None, author=None, community=None, files=None):
    files = _uploaded_files(files)
    max_files = current_app.config["MAX_FILES_PER_POST"]
    if len(files) > max_files:
        raise ValidationError(f"Máximo de {max_files} arquivos por post")

    store = get_attachment_store()
    saved_filenames = []

    try:
        post = post_repository.create_post(
            post_id=str(uuid.uuid4()),
            author=text_or_default(author, DEFAULT_AUTHOR),
            text=text_or_default(text, ""),
            community=text_or_default(community, ""),
            created_at=now_ms(),
        )

        for file in files:
            filename = store.save(file)
            saved_filenames.append(filename)
            media_repository.add_media(
                post_id=post.id,
                filename=filename,
                mime=getattr(file, "mimetype", None) or "application/octet-stream",
            )

        db.session.commit()
    except Exception:
        db.session.rollback()
        for filename in saved_filenames:
            store.delete(filename)
        raise

    current_app.logger.info("Created post %s with %d media", post.id, len(saved_filenames))
    return _post_schema.dump(_post_fields(post))


def get_post(post_id):
    post = post_repository.get_post(post_id)
    if post is None:
        raise NotFoundError("not found")

    payload = _post_fields(post)
    payload["media"] = [_serialize_media(m) for m in media_repository.get_media_by_post(post_id)]
    return _post_detail_schema.dump(payload)


def get_posts(page, limit):
    page, limit = clamp_pagination(page, limit)
    offset = (page - 1) * limit

    posts = post_repository.get_posts_page(limit, offset)
    post_ids = [post.id for post in posts]

    media_by_post = media_repository.get_media_by_posts(post_ids)
    reactions_by_post = reaction_repository.count_by_type_for_posts(post_ids)
    comments_by_post = comment_repository.count_comments_for_posts(post_ids)

    result = []
    for post in posts:
        payload = _post_fields(post)
        payload["media"] = [_serialize_media(m) for m in media_by_post.get(post.id, [])]
        payload["reactions"] = reactions_by_post.get(post.id, {})
        payload["comments_count"] = comments_by_post.get(post.id, 0)
        result.append(payload)

    return {
        "page": page,
        "limit": limit,
        "posts": _feed_post_schema.dump(result),
    }


def delete_post(post_id):
    """Remove a post, its attachment files and every row that points at it.

    Files go first, then all rows in one transaction. If the commit fails the
    files are already gone while the rows stay.
    """
    store = get_attachment_store()

    for media in media_repository.get_media_by_post(post_id):
        store.delete(media.filename)

    try:
        media_repository.delete_media_by_post(post_id)
        reaction_repository.delete_reactions_by_post(post_id)
        comment_repository.delete_comments_by_post(post_id)
        post_repository.delete_post(post_id)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info("Deleted post %s", post_id)
