from community_feed.clock import now_ms
from community_feed.db import db
from community_feed.repositories import reaction_repository
from community_feed.services.inputs import text_or_default


DEFAULT_REACTION_TYPE = "like"
DEFAULT_USER = "anonymous"


def add_reaction(post_id, reaction_type=None, user=None):
    # append-only: the same user may react with the same type any number of times
    reaction = reaction_repository.create_reaction(
        post_id=post_id,
        reaction_type=text_or_default(reaction_type, DEFAULT_REACTION_TYPE),
        user=text_or_default(user, DEFAULT_USER),
        created_at=now_ms(),
    )

    db.session.commit()
    return reaction


def get_reaction_counts(post_id):
    return reaction_repository.count_by_type(post_id)
