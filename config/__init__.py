"""
Configuration module for the campaign mailer.
Exports the settings singleton and its accessor.
"""

from config.settings import settings, get_settings

__all__ = ["settings", "get_settings"]
