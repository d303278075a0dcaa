"""Root conftest: in-memory Mongo collection + Flask test client.

Design Decisions:
    - mongomock collection injected into CropStore: no MongoDB server needed,
      and the same filters/update operators run as in production
    - DISABLE_MONGO=1 before importing app.py so the module-level app never
      touches Flask-PyMongo
"""

import os

os.environ.setdefault("DISABLE_MONGO", "1")

import mongomock
import pytest

from app import create_app
from cropmarket.services.catalog_service import CropCatalogService
from cropmarket.services.crop_store import CropStore
from cropmarket.services.interest_service import InterestService
from cropmarket.services.projection_service import ProjectionService


OWNER_EMAIL = "a@x.com"


@pytest.fixture
def collection():
    return mongomock.MongoClient().cropsService.Crops


@pytest.fixture
def store(collection):
    return CropStore(collection)


@pytest.fixture
def interests(store):
    return InterestService(store)


@pytest.fixture
def catalog(store):
    return CropCatalogService(store)


@pytest.fixture
def projections(store):
    return ProjectionService(store)


@pytest.fixture
def crop_id(catalog):
    """A wheat listing owned by a@x.com, no interests yet."""
    res = catalog.create_crops({
        "type": "grain",
        "name": "Wheat",
        "quantity": 100,
        "owner": {"ownerEmail": OWNER_EMAIL, "ownerName": "A"},
    })
    return res.value["insertedId"]


@pytest.fixture
def app(store):
    return create_app({"TESTING": True}, crop_store=store)


@pytest.fixture
def client(app):
    return app.test_client()
