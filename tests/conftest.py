import pytest
from flask_jwt_extended import create_access_token

from healbot import create_app
from healbot.extensions import db as _db
from healbot.models import FamilyMember, User

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "JWT_SECRET_KEY": "test-secret-key-for-healbot-tokens-0123456789",
    "APP_TIMEZONE": "UTC",
}


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def make_user(db):
    def _make_user(email="parent@example.com", name="Parent", password="secret123"):
        user = User(name=name, email=email)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_patient(db):
    def _make_patient(user, name="Grandma", relationship="Grandmother"):
        member = FamilyMember(user_id=user.id, name=name, relationship=relationship)
        db.session.add(member)
        db.session.commit()
        return member
    return _make_patient


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def patient(make_patient, user):
    return make_patient(user)


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = create_access_token(identity=str(user.id))
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
