from community_feed.db import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.String(36), primary_key=True)
    author = db.Column(db.Text)
    text = db.Column(db.Text)
    community = db.Column(db.Text)
    created_at = db.Column(db.BigInteger, index=True)
