from community_feed.extensions.extensions import ma


class MediaSchema(ma.Schema):
    url = ma.Str()
    mime = ma.Str()


class PostSchema(ma.Schema):
    id = ma.Str()
    author = ma.Str()
    text = ma.Str()
    community = ma.Str()
    created_at = ma.Int()


class PostDetailSchema(PostSchema):
    media = ma.List(ma.Nested(MediaSchema))


class FeedPostSchema(PostDetailSchema):
    reactions = ma.Dict(keys=ma.Str(), values=ma.Int())
    comments_count = ma.Int()
