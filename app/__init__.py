from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from config import Config
from .common.error_handlers import register_error_handlers
from app.common.logger import setup_logger

# Initialize extensions globally
db = SQLAlchemy()
migrate = Migrate()

def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)

    # setup logging
    setup_logger(app)

    # Register route blueprints
    from app.routes.home import home_bp
    app.register_blueprint(home_bp)

    from app.routes.category import category_bp
    app.register_blueprint(category_bp, url_prefix="/catalog")

    from app.routes.items import items_bp
    app.register_blueprint(items_bp, url_prefix="/catalog")

    register_error_handlers(app)

    return app
