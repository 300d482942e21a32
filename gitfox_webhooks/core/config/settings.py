"""
Main configuration class that composes all configs.
"""

import logging
import os

from dotenv import load_dotenv

from gitfox_webhooks.core.config.logging_config import LoggingConfig
from gitfox_webhooks.core.config.webhook_config import WebhookConfig
from gitfox_webhooks.core.models import HookEventType

# Load environment variables from a .env file
load_dotenv()


def _parse_events(raw: str | None) -> list[str]:
    if not raw or not raw.strip():
        return [event.value for event in HookEventType]
    return [name.strip() for name in raw.split(",") if name.strip()]


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.webhook = WebhookConfig(
            secret=os.getenv("GITFOX_WEBHOOK_SECRET", ""),
            events=_parse_events(os.getenv("GITFOX_WEBHOOK_EVENTS")),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            json=os.getenv("LOG_JSON", "false").lower() == "true",
        )

    def validate(self) -> list[str]:
        """Validate configuration and return the problems found."""
        # Imported here: the webhooks package imports this module.
        from gitfox_webhooks.webhooks.registry import supported_events

        errors = []

        known = {event.value for event in supported_events()}
        unknown = [name for name in self.webhook.events if name not in known]
        if unknown:
            errors.append(f"GITFOX_WEBHOOK_EVENTS contains unknown events: {', '.join(unknown)}")

        if not self.webhook.events:
            errors.append("GITFOX_WEBHOOK_EVENTS must name at least one event")

        if not isinstance(logging.getLevelName(self.logging.level), int):
            errors.append(f"LOG_LEVEL {self.logging.level!r} is not a valid level")

        return errors


# Global config instance
config = Config()
