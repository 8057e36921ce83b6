import io
import os
import re
import shutil
import tempfile
import unittest
from unittest.mock import patch

from werkzeug.datastructures import FileStorage


class TestFeedServices(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)
        cls.upload_dir = tempfile.mkdtemp(prefix="uploads-")

        from community_feed import create_app
        from community_feed.db import db

        cls.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}",
            "UPLOAD_DIR": cls.upload_dir,
        })
        cls.db = db

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            cls.db.engine.dispose()
        shutil.rmtree(cls.upload_dir, ignore_errors=True)
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        self.ctx = self.app.app_context()
        self.ctx.push()
        self.db.drop_all()
        self.db.create_all()
        for name in os.listdir(self.upload_dir):
            os.remove(os.path.join(self.upload_dir, name))

    def tearDown(self):
        self.db.session.remove()
        self.ctx.pop()

    def test_reaction_counts_group_by_type(self):
        from community_feed.services import post_service, reaction_service

        post = post_service.create_post_with_media(text="counted")
        for reaction_type in ["like", "like", "wow", "like"]:
            reaction_service.add_reaction(post["id"], reaction_type=reaction_type)

        self.assertEqual(
            reaction_service.get_reaction_counts(post["id"]),
            {"like": 3, "wow": 1},
        )
        self.assertEqual(reaction_service.get_reaction_counts("other"), {})

    def test_reaction_fields_are_free_text(self):
        from community_feed.services import reaction_service

        reaction = reaction_service.add_reaction("any-post", reaction_type="🔥", user=42)

        self.assertEqual(reaction.type, "🔥")
        self.assertEqual(reaction.user, "42")

    def test_empty_comment_writes_nothing(self):
        from community_feed.errors import ValidationError
        from community_feed.services import comment_service, post_service

        post = post_service.create_post_with_media(text="quiet")
        comment_service.add_comment(post["id"], "first")

        with self.assertRaises(ValidationError) as ctx:
            comment_service.add_comment(post["id"], "")

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Texto vazio")
        self.assertEqual(comment_service.get_comments_count(post["id"]), 1)

    def test_get_post_raises_not_found(self):
        from community_feed.errors import NotFoundError
        from community_feed.services import post_service

        with self.assertRaises(NotFoundError) as ctx:
            post_service.get_post("missing")
        self.assertEqual(ctx.exception.status_code, 404)

    def test_feed_uses_one_query_per_related_entity(self):
        from community_feed.repositories import comment_repository, media_repository
        from community_feed.repositories import reaction_repository
        from community_feed.services import post_service

        for i in range(5):
            post_service.create_post_with_media(text=f"post {i}")

        with patch.object(
            media_repository, "get_media_by_posts", wraps=media_repository.get_media_by_posts
        ) as media_spy, patch.object(
            reaction_repository,
            "count_by_type_for_posts",
            wraps=reaction_repository.count_by_type_for_posts,
        ) as reaction_spy, patch.object(
            comment_repository,
            "count_comments_for_posts",
            wraps=comment_repository.count_comments_for_posts,
        ) as comment_spy:
            feed = post_service.get_posts(1, 8)

        self.assertEqual(len(feed["posts"]), 5)
        self.assertEqual(media_spy.call_count, 1)
        self.assertEqual(reaction_spy.call_count, 1)
        self.assertEqual(comment_spy.call_count, 1)

    def test_feed_of_empty_page(self):
        from community_feed.services import post_service

        self.assertEqual(
            post_service.get_posts(3, 8),
            {"page": 3, "limit": 8, "posts": []},
        )

    def test_attachment_store_names_and_deletes_files(self):
        from community_feed.extensions.attachment_store import get_attachment_store

        store = get_attachment_store()
        upload = FileStorage(
            stream=io.BytesIO(b"content"),
            filename="../../etc/holiday photo.JPG",
            content_type="image/jpeg",
        )

        filename = store.save(upload)

        self.assertRegex(filename, r"^\d+_[0-9a-f\-]{36}\.JPG$")
        self.assertEqual(os.path.dirname(store.path_for(filename)), store.upload_dir)
        with open(store.path_for(filename), "rb") as fh:
            self.assertEqual(fh.read(), b"content")
        self.assertEqual(store.url_for(filename), f"/uploads/{filename}")

        self.assertTrue(store.delete(filename))
        self.assertFalse(store.exists(filename))
        self.assertFalse(store.delete(filename))

    def test_attachment_keeps_extension_of_non_ascii_name(self):
        from community_feed.extensions.attachment_store import get_attachment_store

        store = get_attachment_store()
        upload = FileStorage(
            stream=io.BytesIO(b"png-bytes"),
            filename="照片.png",
            content_type="image/png",
        )

        filename = store.save(upload)

        self.assertRegex(filename, r"^\d+_[0-9a-f\-]{36}\.png$")
        self.assertRegex(store.build_filename("файл.tar.gz"), r"\.gz$")
        self.assertNotRegex(store.build_filename("a.照片"), r"\.")
        self.assertNotRegex(store.build_filename("evil./../x"), r"/")

        response = self.app.test_client().get(store.url_for(filename))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, "image/png")
        self.assertEqual(response.data, b"png-bytes")
        response.close()

    def test_attachment_delete_tolerates_file_vanishing(self):
        from community_feed.extensions.attachment_store import get_attachment_store

        store = get_attachment_store()

        with patch("community_feed.extensions.attachment_store.os.path.isfile", return_value=True):
            self.assertFalse(store.delete("already-gone.png"))

    def test_attachment_names_do_not_collide(self):
        from community_feed.extensions.attachment_store import get_attachment_store

        store = get_attachment_store()
        names = {store.build_filename("a.png") for _ in range(50)}

        self.assertEqual(len(names), 50)
        self.assertTrue(all(re.match(r"^\d+_", name) for name in names))

    def test_clock_never_goes_backwards(self):
        from community_feed import clock

        with patch.object(clock, "_last_ms", 0), patch.object(
            clock.time, "time", side_effect=[2_000.0, 1_000.0]
        ):
            first = clock.now_ms()
            second = clock.now_ms()

        self.assertEqual(first, 2_000_000)
        self.assertEqual(second, first)


if __name__ == "__main__":
    unittest.main()
