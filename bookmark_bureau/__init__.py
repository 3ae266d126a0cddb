from flask import Flask

from bookmark_bureau.config import Config
from bookmark_bureau.extensions import db, migrate


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    migrate.init_app(app, db)

    # Importing registers the tables on db.metadata before create_all().
    from bookmark_bureau import models  # noqa: F401

    @app.cli.command("init-db")
    def init_db_command():
        db.create_all()
        print("Initialized Bookmark Bureau database.")

    with app.app_context():
        db.create_all()

    return app
