from community_feed.db import db


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.String(36), primary_key=True)

    post_id = db.Column(db.String(36), index=True)

    user = db.Column(db.Text)

    text = db.Column(db.Text, nullable=False)

    created_at = db.Column(db.BigInteger)
