import sys
from pathlib import Path
import pytest

# make the project root importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from app import create_app, db
from app.models import Category, Item


@pytest.fixture
def app(tmp_path):
    config = {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test_inventory.db'}",
        "SECRET_KEY": "test-secret-key",
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "LOG_DIR": str(tmp_path / "logs"),
    }
    app = create_app(config)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def make_category(ctx):
    def _make(name, description=""):
        category = Category(name=name, description=description)
        db.session.add(category)
        db.session.commit()
        return category
    return _make


@pytest.fixture
def make_item(ctx):
    def _make(name, categories=(), price=10, numstock=5, description=""):
        item = Item(name=name, description=description, price=price, numstock=numstock)
        for category in categories:
            item.categories.append(category)
        db.session.add(item)
        db.session.commit()
        return item
    return _make
