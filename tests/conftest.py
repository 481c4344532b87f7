import pytest
from unittest import mock

from app import create_app
from extensions import db
from models import Post, Project, User
from utils.data import get_or_create_tags
from utils.security import hash_password

ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'admin-password'
VISITOR_EMAIL = 'reader@example.com'
VISITOR_PASSWORD = 'visitor-password'


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def ctx(app):
    """Application context for tests that talk to the database directly"""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def _create_user(app, email, password, full_name, role):
    with app.app_context():
        user = User(email=email, full_name=full_name,
                    password_hash=hash_password(password), role=role)
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture
def admin_user(app):
    return _create_user(app, ADMIN_EMAIL, ADMIN_PASSWORD, 'Site Owner', 'admin')


@pytest.fixture
def visitor_user(app):
    return _create_user(app, VISITOR_EMAIL, VISITOR_PASSWORD, 'Jane Reader', 'user')


def login(client, email, password):
    return client.post('/login', data={'email': email, 'password': password})


@pytest.fixture
def admin_client(client, admin_user):
    login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    return client


@pytest.fixture
def visitor_client(client, visitor_user):
    login(client, VISITOR_EMAIL, VISITOR_PASSWORD)
    return client


@pytest.fixture
def make_post(app):
    """Insert a post and return its serialized form"""
    def _make_post(slug, title=None, published=True, featured=False,
                   category='technology', tags=(), excerpt='', content='Body text',
                   created_at=None):
        with app.app_context():
            post = Post(slug=slug, title=title or slug.replace('-', ' ').title(),
                        excerpt=excerpt, content=content, category=category,
                        published=published, featured=featured)
            if created_at:
                post.created_at = created_at
            post.tags = get_or_create_tags(tags)
            db.session.add(post)
            db.session.commit()
            return post.to_dict()
    return _make_post


@pytest.fixture
def make_project(app):
    """Insert a project and return its serialized form"""
    def _make_project(slug, title=None, published=True, featured=False,
                      category='development', tags=(), description='A project'):
        with app.app_context():
            project = Project(slug=slug, title=title or slug.replace('-', ' ').title(),
                              description=description, category=category,
                              published=published, featured=featured)
            project.tags = get_or_create_tags(tags)
            db.session.add(project)
            db.session.commit()
            return project.to_dict()
    return _make_project


@pytest.fixture
def email_api():
    """Patch the Resend HTTP call; every send succeeds unless told otherwise"""
    with mock.patch('utils.notifications.requests.post') as post:
        response = mock.MagicMock()
        response.ok = True
        response.status_code = 200
        response.json.return_value = {'id': 'email_123'}
        post.return_value = response
        yield post
