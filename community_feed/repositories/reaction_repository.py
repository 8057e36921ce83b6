import uuid

from sqlalchemy import func

from community_feed.db import db
from community_feed.models.reaction_model import Reaction


def create_reaction(post_id, reaction_type, user, created_at):
    reaction = Reaction(
        id=str(uuid.uuid4()),
        post_id=post_id,
        type=reaction_type,
        user=user,
        created_at=created_at
    )
    db.session.add(reaction)
    return reaction


def count_by_type(post_id):
    rows = (
        db.session.query(Reaction.type, func.count(Reaction.id))
        .filter(Reaction.post_id == post_id)
        .group_by(Reaction.type)
        .all()
    )
    return {reaction_type: count for reaction_type, count in rows}


def count_by_type_for_posts(post_ids):
    counts = {post_id: {} for post_id in post_ids}
    if not post_ids:
        return counts

    rows = (
        db.session.query(Reaction.post_id, Reaction.type, func.count(Reaction.id))
        .filter(Reaction.post_id.in_(post_ids))
        .group_by(Reaction.post_id, Reaction.type)
        .all()
    )
    for post_id, reaction_type, count in rows:
        counts.setdefault(post_id, {})[reaction_type] = count
    return counts


def delete_reactions_by_post(post_id):
    return Reaction.query.filter_by(post_id=post_id).delete(synchronize_session=False)
