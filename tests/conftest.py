"""
Pytest configuration and fixtures for testing translatable models.
"""

import os
import sys
import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Keep the locale caches in-process
os.environ.pop('REDIS_URL', None)
os.environ.pop('DEFAULT_LOCALE', None)

from translatable import create_app, db
from translatable.services.locales import get_locales
from translatable.services.redis_client import reset_redis
from tests.models import Product, Article  # noqa: F401 - register test tables

fake = Faker()


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a fresh database session and locale registry for each test."""
    reset_redis()
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        get_locales().reset()
        yield db.session
        db.session.rollback()
        get_locales().reset()


@pytest.fixture
def registry(db_session):
    """The process-wide locale registry, reset for this test."""
    return get_locales()


@pytest.fixture
def locales(registry):
    """Register en, fr and es. Returns iso code -> locale id."""
    for code, name in (('en', 'English'), ('fr', 'French'), ('es', 'Spanish')):
        registry.add({'iso_code': code, 'name': name, 'charset': 'UTF-8'})
    return dict(registry.locale_ids)


def _create_product(**overrides):
    """Helper to create a product with sensible defaults."""
    data = {
        'sku': fake.unique.bothify(text='SKU-####-??'),
        'price': round(fake.pyfloat(min_value=1, max_value=500, right_digits=2), 2),
    }
    data.update(overrides)
    product = Product(**data)
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def product(db_session):
    """Create a test product without translations."""
    return _create_product()


@pytest.fixture
def second_product(db_session):
    """Create a second product for isolation tests."""
    return _create_product()


@pytest.fixture
def article(db_session):
    """Create a soft-deletable test article."""
    article = Article(slug=fake.slug())
    db.session.add(article)
    db.session.commit()
    return article


@pytest.fixture
def request_locale(app):
    """Context manager factory simulating a request in the given locale."""
    def _request_locale(code):
        return app.test_request_context(f'/?lang={code}')
    return _request_locale
