import logging
from flask import Flask
from config import Config
from database import init_db, close_db
from metrics import HitCounter
from routes.admin_bp import admin_bp
from routes.api_bp import api_bp
from routes.app_bp import app_bp


def create_app(test_config=None, hit_counter=None):
    """
    Creates the central application object.
    test_config overrides values from Config, hit_counter lets the caller
    share or inspect the visit counter.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config is not None:
        app.config.update(test_config)

    # The one piece of shared state; handlers reach it through current_app.extensions
    app.extensions['hit_counter'] = hit_counter if hit_counter is not None else HitCounter()

    """ Here we are registering blueprints
    These routes are assigned namespaces by the argument of the url prefix.
    """
    app.register_blueprint(api_bp, url_prefix='/api')  # JSON API: health, users, chirps
    app.register_blueprint(admin_bp, url_prefix='/admin')  # Hit counter page and reset
    app.register_blueprint(app_bp, url_prefix='/app')  # Static files, counted

    app.teardown_appcontext(close_db)

    # Ensures the SQLite schema exists before the server starts accepting requests.
    with app.app_context():
        init_db(app.config['DB_PATH'])

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(host="0.0.0.0", port=8080)
