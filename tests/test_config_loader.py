import pytest
from pydantic import ValidationError

from src.utils.config_loader import ConfigError, load_app_config

YAML = """
notion:
  organizations_database_id: org-db
  contacts_database_id: contacts-db
"""

ENV = {"NOTION_TOKEN": "secret_token", "PASSWORD": "s3cret"}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "notion_config.yml"
    path.write_text(YAML, encoding="utf-8")
    return path


def test_loads_yaml_and_secrets(config_file):
    cfg = load_app_config(config_file, env=ENV)
    assert cfg.notion_token == "secret_token"
    assert cfg.password == "s3cret"
    assert cfg.notion.contacts_database_id == "contacts-db"
    assert cfg.notion.api_base_url == "https://api.notion.com/v1"
    assert cfg.gate.public_path_prefix == "/public"
    assert cfg.google_api_key is None


def test_env_overrides_database_ids(config_file):
    cfg = load_app_config(config_file, env={**ENV, "NOTION_CONTACTS_DATABASE_ID": "other-db"})
    assert cfg.notion.contacts_database_id == "other-db"
    assert cfg.notion.organizations_database_id == "org-db"


def test_missing_secret_in_real_mode(config_file):
    with pytest.raises(ConfigError):
        load_app_config(config_file, env={"NOTION_TOKEN": "secret_token"})


def test_mock_mode_needs_no_secrets(config_file):
    cfg = load_app_config(config_file, env={"INTEGRATIONS_MODE": "MOCK"})
    assert cfg.integrations_mode == "mock"


def test_missing_database_id_fails_validation(tmp_path):
    path = tmp_path / "notion_config.yml"
    path.write_text("notion:\n  contacts_database_id: contacts-db\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_app_config(path, env=ENV)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "absent.yml", env=ENV)


def test_repository_config_is_valid():
    cfg = load_app_config(env=ENV)
    assert cfg.notion.organizations_database_id
    assert cfg.notion.contacts_database_id
