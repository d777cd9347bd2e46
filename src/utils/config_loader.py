"""
Configuration loader for the contact sync service.

Notion database ids and the gate settings live in config/notion_config.yml;
secrets are read from the environment (populated from .env by the entry point).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "notion_config.yml"

# Environment variable -> AppConfig field
_ENV_SECRETS = {
    "NOTION_TOKEN": "notion_token",
    "PASSWORD": "password",
    "GOOGLE_API_KEY": "google_api_key",
    "GCP_SERVICE_ACCOUNT": "gcp_service_account",
    "INTEGRATIONS_MODE": "integrations_mode",
}

_ENV_DATABASE_OVERRIDES = {
    "NOTION_ORGANIZATIONS_DATABASE_ID": "organizations_database_id",
    "NOTION_CONTACTS_DATABASE_ID": "contacts_database_id",
}


class ConfigError(ValueError):
    """Raised when a required secret is missing."""


class NotionConfig(BaseModel):
    """Notion API and database configuration"""

    api_base_url: str = "https://api.notion.com/v1"
    api_version: str = "2022-06-28"
    timeout_seconds: float = Field(default=20.0, gt=0)
    organizations_database_id: str = Field(min_length=1)
    contacts_database_id: str = Field(min_length=1)


class GateConfig(BaseModel):
    """Shared-secret gate configuration"""

    public_path_prefix: str = "/public"


class AppConfig(BaseModel):
    notion_token: str = ""
    password: str = ""
    # Reserved for the Google enrichment work, not read anywhere yet
    google_api_key: Optional[str] = None
    gcp_service_account: Optional[str] = None
    integrations_mode: Literal["real", "mock"] = "real"
    notion: NotionConfig
    gate: GateConfig = Field(default_factory=GateConfig)


def load_app_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Load and validate the service configuration.

    Args:
        config_path: Path to the YAML file. Defaults to config/notion_config.yml
        env: Environment mapping. Defaults to os.environ

    Returns:
        Validated AppConfig object

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValidationError: If the merged config doesn't match the schema
        ConfigError: If a secret required in real mode is missing
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    if env is None:
        env = os.environ

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    for env_key, field_name in _ENV_SECRETS.items():
        value = (env.get(env_key) or "").strip()
        if value:
            data[field_name] = value.lower() if field_name == "integrations_mode" else value

    notion_data = dict(data.get("notion") or {})
    for env_key, field_name in _ENV_DATABASE_OVERRIDES.items():
        value = (env.get(env_key) or "").strip()
        if value:
            notion_data[field_name] = value
    data["notion"] = notion_data

    try:
        config = AppConfig(**data)
    except ValidationError as e:
        logger.error("Config validation failed: %s", e)
        raise

    if config.integrations_mode == "real":
        missing = [key for key, field_name in (("NOTION_TOKEN", "notion_token"), ("PASSWORD", "password"))
                   if not getattr(config, field_name)]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    logger.info("Loaded config from %s (integrations_mode=%s)", config_path, config.integrations_mode)
    return config
