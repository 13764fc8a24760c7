import pytest
from flask_jwt_extended import create_access_token

from wishlist_api import create_app, db


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'JWT_SECRET_KEY': 'test-jwt-secret',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_header(app):
    def _auth_header(email, **kwargs):
        token = create_access_token(identity=email, **kwargs)
        return {'Authorization': f'Bearer {token}'}
    return _auth_header
