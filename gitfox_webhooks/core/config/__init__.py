"""
Configuration package - unified access point.

This package provides all configuration classes and the global config instance.
"""

from gitfox_webhooks.core.config.logging_config import LoggingConfig
from gitfox_webhooks.core.config.settings import Config, config
from gitfox_webhooks.core.config.webhook_config import WebhookConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "WebhookConfig",
    "config",
]
