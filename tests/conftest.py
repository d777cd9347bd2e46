"""Pytest fixtures for the contact sync tests."""

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.integrations.clients.mocks.notion import InMemoryNotionStore
from src.utils.config_loader import AppConfig, NotionConfig

PASSWORD = "s3cret"
ORGANIZATIONS_DB = "org-db"
CONTACTS_DB = "contacts-db"


@pytest.fixture
def config():
    return AppConfig(
        notion_token="secret_token",
        password=PASSWORD,
        notion=NotionConfig(
            organizations_database_id=ORGANIZATIONS_DB,
            contacts_database_id=CONTACTS_DB,
        ),
    )


@pytest.fixture
def store():
    """In-memory Notion store stub for tests."""
    return InMemoryNotionStore()


@pytest.fixture
def client(config, store):
    return TestClient(create_app(config, store=store))


@pytest.fixture
def auth_headers():
    return {"Authorization": PASSWORD}
