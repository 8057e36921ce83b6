from flask import Blueprint, request

from community_feed.errors import FeedError
from community_feed.routes.responses import feed_error_response, success
from community_feed.services import comment_service

comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/posts/<post_id>/comments", methods=["POST"])
def create_comment(post_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        comment = comment_service.add_comment(
            post_id=post_id,
            text=data.get("text"),
            user=data.get("user"),
        )
        return success(id=comment.id)
    except FeedError as e:
        return feed_error_response(e)


@comment_bp.route("/posts/<post_id>/comments", methods=["GET"])
def list_comments(post_id):
    page = request.args.get("page")
    limit = request.args.get("limit")

    return success(**comment_service.get_post_comments(post_id, page, limit))
