from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from community_feed.config import Config
from community_feed.db import db
from community_feed.extensions.attachment_store import init_attachment_store
from community_feed.extensions.extensions import cors, ma
from community_feed.routes.comment_routes import comment_bp
from community_feed.routes.main_routes import main_bp
from community_feed.routes.post_routes import post_bp
from community_feed.routes.reaction_routes import reaction_bp
from community_feed.routes.responses import failure


def _register_error_handlers(app):
    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        app.logger.exception("Store operation failed")
        return failure(str(error), 500)

    @app.errorhandler(OSError)
    def handle_filesystem_error(error):
        db.session.rollback()
        app.logger.exception("Attachment storage failed")
        return failure(str(error), 500)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    ma.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ALLOWED_ORIGINS"])
    init_attachment_store(app)

    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(reaction_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")
    app.register_blueprint(main_bp)
    _register_error_handlers(app)

    with app.app_context():
        db.create_all()

    return app
