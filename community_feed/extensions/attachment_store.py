import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

from community_feed.clock import now_ms


UPLOADS_URL_PREFIX = "/uploads/"


class AttachmentStore:
    """Uploaded files kept flat under a single directory.

    Stored names look like ``<epoch_ms>_<uuid4><ext>``; the extension is taken
    from the client's filename and nothing else about the upload is checked.
    """

    def __init__(self, upload_dir: str):
        self.upload_dir = os.path.abspath(upload_dir)
        os.makedirs(self.upload_dir, exist_ok=True)

    def build_filename(self, original_name: str | None) -> str:
        extension = os.path.splitext(original_name or "")[1]
        # sanitise only the extension; the base name may be non-ASCII
        extension = os.path.splitext(secure_filename("x" + extension))[1]
        return f"{now_ms()}_{uuid.uuid4()}{extension}"

    def path_for(self, filename: str) -> str:
        return os.path.join(self.upload_dir, filename)

    def save(self, file_storage) -> str:
        filename = self.build_filename(getattr(file_storage, "filename", None))

        try:
            file_storage.stream.seek(0)
        except (AttributeError, OSError):
            pass

        file_storage.save(self.path_for(filename))
        return filename

    def delete(self, filename: str) -> bool:
        path = self.path_for(filename)
        if not os.path.isfile(path):
            return False
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        return True

    def exists(self, filename: str) -> bool:
        return os.path.isfile(self.path_for(filename))

    @staticmethod
    def url_for(filename: str) -> str:
        return f"{UPLOADS_URL_PREFIX}{filename}"


def init_attachment_store(app) -> AttachmentStore:
    store = AttachmentStore(app.config["UPLOAD_DIR"])
    app.extensions["attachment_store"] = store
    return store


def get_attachment_store() -> AttachmentStore:
    return current_app.extensions["attachment_store"]
