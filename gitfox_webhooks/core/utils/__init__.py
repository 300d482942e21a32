"""
Shared utilities.
"""

from gitfox_webhooks.core.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
