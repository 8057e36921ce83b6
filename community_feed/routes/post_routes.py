from flask import Blueprint, request

from community_feed.errors import FeedError
from community_feed.routes.responses import feed_error_response, success
from community_feed.services import post_service

post_bp = Blueprint("posts", __name__)


@post_bp.route("/posts", methods=["POST"])
def create_post():
    try:
        post = post_service.create_post_with_media(
            text=request.form.get("text"),
            author=request.form.get("author"),
            community=request.form.get("community"),
            files=request.files.getlist("files"),
        )
        return success(post=post)
    except FeedError as e:
        return feed_error_response(e)


@post_bp.route("/posts", methods=["GET"])
def list_posts():
    page = request.args.get("page")
    limit = request.args.get("limit")

    data = post_service.get_posts(page, limit)
    return success(**data)


@post_bp.route("/posts/<post_id>", methods=["GET"])
def get_post(post_id):
    try:
        return success(post=post_service.get_post(post_id))
    except FeedError as e:
        return feed_error_response(e)


@post_bp.route("/posts/<post_id>", methods=["DELETE"])
def delete_post(post_id):
    post_service.delete_post(post_id)
    return success()
