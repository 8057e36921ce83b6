from community_feed.extensions.extensions import ma


class CommentResponseSchema(ma.Schema):
    id = ma.Str()
    post_id = ma.Str()
    user = ma.Str()
    text = ma.Str()
    created_at = ma.Int()
