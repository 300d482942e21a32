"""
Webhook configuration.
"""

from dataclasses import dataclass, field


@dataclass
class WebhookConfig:
    """Webhook receiver configuration."""

    secret: str = ""
    events: list[str] = field(default_factory=list)
