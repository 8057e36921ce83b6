from community_feed import create_app
from community_feed.db import db

app = create_app()


if __name__ == "__main__":
    host = app.config["HOST"]
    port = app.config["PORT"]
    app.logger.info("API rodando em http://localhost:%s", port)
    try:
        app.run(host=host, port=port)
    finally:
        with app.app_context():
            db.engine.dispose()
