from flask import Blueprint, request

from community_feed.routes.responses import success
from community_feed.services.reaction_service import add_reaction

reaction_bp = Blueprint("reactions", __name__)


@reaction_bp.route("/posts/<post_id>/reactions", methods=["POST"])
def create_reaction(post_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    reaction = add_reaction(
        post_id=post_id,
        reaction_type=data.get("type"),
        user=data.get("user"),
    )
    return success(id=reaction.id)
