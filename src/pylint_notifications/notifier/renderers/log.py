"""Logging renderer implementation."""

from __future__ import annotations

import html
import logging
from typing import TYPE_CHECKING

from pylint_notifications.notifier.models import Severity
from pylint_notifications.notifier.trace import LINE_BREAK_MARKUP

if TYPE_CHECKING:
    from pylint_notifications.notifier.models import NotificationGroup, NotificationRequest

SEVERITY_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}

DEFAULT_LOGGER_NAME = "pylint_notifications.notifications"


class LogRenderer:
    """Renders notifications as log records.

    Used when no interactive host is available. Markup in the body is
    turned back into plain text.
    """

    def __init__(self, logger_name: str = DEFAULT_LOGGER_NAME) -> None:
        """Initialize the renderer.

        Args:
            logger_name: Name of the logger records are written to.
        """
        self.name = "log"
        self._logger = logging.getLogger(logger_name)

    def render(
        self,
        context: object,
        group: NotificationGroup,
        request: NotificationRequest,
    ) -> None:
        """Write the notification to the log."""
        headline = request.title
        if request.subtitle:
            headline = f"{headline} - {request.subtitle}"
        text = html.unescape(request.body.replace(LINE_BREAK_MARKUP, "\n"))

        self._logger.log(
            SEVERITY_LEVELS[request.severity],
            f"[{group.display_id}] {headline}: {text}",
            extra={
                "notification_context": context,
                "notification_channel": request.channel.value,
            },
        )
        if request.actions:
            labels = ", ".join(action.label for action in request.actions)
            self._logger.info(f"[{group.display_id}] Available actions: {labels}")
