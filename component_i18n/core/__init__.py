"""Ambient concerns shared by every sub-package: settings and logging."""

from component_i18n.core.config import I18nSettings, Settings, settings
from component_i18n.core.logging import configure_logging, get_module_logger

__all__ = [
    "I18nSettings",
    "Settings",
    "settings",
    "configure_logging",
    "get_module_logger",
]
