import pytest

from bookmark_bureau import create_app
from bookmark_bureau.config import TestConfig
from bookmark_bureau.extensions import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield app
