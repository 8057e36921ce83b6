from flask import Blueprint, send_from_directory

from community_feed.extensions.attachment_store import get_attachment_store

main_bp = Blueprint("main", __name__)


@main_bp.route("/uploads/<path:filename>", methods=["GET", "HEAD"])
def get_upload(filename: str):
    store = get_attachment_store()
    return send_from_directory(store.upload_dir, filename)
