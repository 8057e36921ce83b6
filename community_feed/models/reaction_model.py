from community_feed.db import db


class Reaction(db.Model):
    __tablename__ = "reactions"

    id = db.Column(db.String(36), primary_key=True)

    post_id = db.Column(db.String(36), index=True)

    # free text, e.g. "like"; no closed set and no per-user uniqueness
    type = db.Column(db.Text)

    user = db.Column(db.Text)

    created_at = db.Column(db.BigInteger)
