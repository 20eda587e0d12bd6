"""
Shared pytest fixtures for catalog_api tests.
"""
import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from catalog_api.core import config
from catalog_api.di.base_container import BaseContainer
from catalog_api.di.container import set_container
from catalog_api.di.providers import AuthProvider, ProductProvider
from catalog_api.domain.repositories.user_repository import UserRepository
from catalog_api.domain.repositories.product_repository import ProductRepository
from tests.fakes import InMemoryUserRepository, InMemoryProductRepository


TEST_ENV = {
    "MONGO_URI": "mongodb://localhost:27017",
    "MONGO_DB_NAME": "test_catalog_db",
    "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
    "JWT_ALGORITHM": "HS256",
    "ACCESS_TOKEN_EXPIRE_MINUTES": "10080",
    "BCRYPT_ROUNDS": "4",
    "DEFAULT_PAGE_SIZE": "10",
    "MAX_PAGE_SIZE": "100",
    "ENVIRONMENT": "development",
}


@pytest.fixture(autouse=True)
def test_settings():
    """
    Fresh Settings built from test environment variables for every test.

    BCRYPT_ROUNDS=4 keeps hashing fast.
    """
    with patch.dict(os.environ, TEST_ENV, clear=False):
        config._settings = None
        yield config.get_settings()
    config._settings = None


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def test_container(user_repo, product_repo):
    """Container wired like DIContainer but backed by in-memory repositories."""
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(ProductRepository, product_repo)
    AuthProvider.register(container)
    ProductProvider.register(container)
    set_container(container)
    yield container
    set_container(None)


@pytest.fixture
def client(test_container):
    """TestClient over the real app (lifespan not run, so no MongoDB needed)."""
    from catalog_api.main import app

    return TestClient(app)
