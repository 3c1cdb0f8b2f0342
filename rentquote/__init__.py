import os

from flask import Flask

from .controllers.quotes import bp as quotes_bp


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        QUOTE_TIMEZONE=os.getenv("QUOTE_TIMEZONE", "UTC"),
    )
    if test_config:
        app.config.update(test_config)
    app.register_blueprint(quotes_bp)

    return app
