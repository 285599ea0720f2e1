"""Remediation actions attached to notifications."""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable
from typing import Protocol

from pylint_notifications.notifier.models import Action, ActionKind

logger = logging.getLogger(__name__)


class SettingsSurface(Protocol):
    """Host entry point that shows the plugin's settings."""

    def show_settings(self, event: object | None) -> None:
        """Open the settings for the interaction that triggered it."""
        ...


def open_install_docs_action(
    label: str,
    url: str,
    opener: Callable[[str], object] = webbrowser.open,
) -> Action:
    """Create the action that opens the installation documentation.

    Args:
        label: Display label.
        url: Documentation URL.
        opener: Callable that opens a URL.
    """

    def effect(event: object | None) -> None:
        logger.debug(f"Opening installation docs: {url}")
        opener(url)

    return Action(kind=ActionKind.OPEN_INSTALL_DOCS, label=label, effect=effect)


def open_plugin_settings_action(label: str, surface: SettingsSurface | None) -> Action:
    """Create the action that opens the plugin settings.

    Args:
        label: Display label.
        surface: Host settings entry point.
    """

    def effect(event: object | None) -> None:
        if surface is None:
            logger.warning("No settings surface configured, cannot open plugin settings")
            return
        surface.show_settings(event)

    return Action(kind=ActionKind.OPEN_PLUGIN_SETTINGS, label=label, effect=effect)
