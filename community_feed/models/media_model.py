from community_feed.db import db


class Media(db.Model):
    __tablename__ = "media"

    id = db.Column(db.String(36), primary_key=True)
    post_id = db.Column(
        db.String(36),
        db.ForeignKey("posts.id"),
        index=True
    )
    filename = db.Column(db.Text)
    mime = db.Column(db.Text)
