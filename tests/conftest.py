"""
Alumni Portal - test configuration and fixtures
"""
import pytest
from faker import Faker

from app import create_app
from models import db
from models.alumni_profile_model import AlumniProfile
from models.user_model import User
from utils.jwt_utils import create_access_token

fake = Faker()

PASSWORD = "secret123"


def new_email():
    return f"{fake.unique.user_name()}@college.edu"


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "JWT_SECRET": "test-jwt-secret-with-at-least-32-bytes",
        "APP_ENV": "testing",
    })
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """
    Insert a user straight into the database and hand back its id, email and
    auth headers. Alumni get a profile; ``mentor`` sets its availability flag.
    """

    def _make(role="student", approved=None, mentor=False, **profile):
        with app.app_context():
            user = User.create(fake.name(), new_email(), PASSWORD, role)
            if approved is not None:
                user.is_approved = approved
            if role == "alumni":
                user.profile = AlumniProfile(is_mentor=mentor, **profile)
            db.session.add(user)
            db.session.commit()
            return {
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "headers": bearer(create_access_token(user)),
            }

    return _make


@pytest.fixture
def admin(make_user):
    return make_user("admin", approved=True)


@pytest.fixture
def student(make_user):
    return make_user("student")


@pytest.fixture
def mentor(make_user):
    return make_user("alumni", approved=True, mentor=True, company="Initech", designation="Engineer")
