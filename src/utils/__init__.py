"""
Utility modules for the contact sync service
"""
from .config_loader import AppConfig, ConfigError, GateConfig, NotionConfig, load_app_config

__all__ = [
    'AppConfig',
    'ConfigError',
    'GateConfig',
    'NotionConfig',
    'load_app_config',
]
