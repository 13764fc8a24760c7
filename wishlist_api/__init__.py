from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from datetime import timedelta
from dotenv import load_dotenv
import logging
import os

# Load environment variables from .env file
load_dotenv()

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()

def create_app(test_config=None):
    app = Flask(__name__)

    # Flask configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv(
        'DATABASE_URL',
        'postgresql+pg8000://postgres@localhost/wishlist'
    )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO').upper()

    # JWT configuration: tokens are issued elsewhere, we only verify them
    app.config['JWT_SECRET_KEY'] = os.getenv('JWT_SECRET_KEY') or os.getenv('SECRET_KEY')
    try:
        access_days = int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES_DAYS', '1'))
    except ValueError:
        access_days = 1
    app.config['JWT_ACCESS_TOKEN_EXPIRES'] = timedelta(days=access_days)

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(getattr(logging, app.config['LOG_LEVEL'], logging.INFO))

    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)

    # The gateway is stateless, so one instance serves every request
    from wishlist_api.auth.identity import IdentityExtractor
    from wishlist_api.services.wishlist_gateway import WishlistGateway
    from wishlist_api.services.wishlist_store import WishlistStore

    app.extensions['wishlist_gateway'] = WishlistGateway(
        IdentityExtractor(logger=app.logger),
        WishlistStore(db.session),
        logger=app.logger,
    )

    # Import and register  blueprint
    from wishlist_api.routes.index import index_bp
    from wishlist_api.routes.error import register_error_handlers
    from wishlist_api.routes.wishlist_route import wishlist_bp

    app.register_blueprint(index_bp, url_prefix='/')
    app.register_blueprint(wishlist_bp, url_prefix='/wishlist')
    register_error_handlers(app)

    return app
