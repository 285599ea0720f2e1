"""Notification dispatcher.

Classifies events by severity and channel, builds the notification request
and hands it to the rendering host. Dispatch is fire-and-forget: each call
makes a single handoff attempt and returns.
"""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from pylint_notifications.config import get_settings
from pylint_notifications.messages import MessageBundle, get_message_bundle
from pylint_notifications.notifier.actions import (
    open_install_docs_action,
    open_plugin_settings_action,
)
from pylint_notifications.notifier.groups import get_notification_groups
from pylint_notifications.notifier.models import (
    Action,
    Channel,
    NotificationGroup,
    NotificationRequest,
    Severity,
)
from pylint_notifications.notifier.trace import TraceFormatter

if TYPE_CHECKING:
    from pylint_notifications.config import Settings
    from pylint_notifications.notifier.actions import SettingsSurface

logger = logging.getLogger(__name__)


class NotifierError(Exception):
    """Base exception for notifier errors."""


class InvalidRequestError(NotifierError):
    """Raised when a notification is requested without a body."""


class RenderingUnavailableError(NotifierError):
    """Raised by renderers that cannot accept a notification."""


class NotificationRenderer(Protocol):
    """Protocol for the host that displays notifications."""

    name: str

    def render(
        self,
        context: object,
        group: NotificationGroup,
        request: NotificationRequest,
    ) -> None:
        """Display a notification in the given context.

        Raises:
            RenderingUnavailableError: If the host cannot accept it.
        """
        ...


class Notifier:
    """Dispatches plugin notifications to a renderer.

    Info, warning and error notifications are shown interactively;
    caught exceptions are only logged. The context argument of every
    operation is an opaque handle identifying where the host should
    display the notification.

    Example:
        ```python
        notifier = Notifier(LogRenderer())
        notifier.warning(project, "Pylint reported 3 fatal messages")
        ```
    """

    def __init__(
        self,
        renderer: NotificationRenderer,
        *,
        settings: Settings | None = None,
        bundle: MessageBundle | None = None,
        settings_surface: SettingsSurface | None = None,
        url_opener: Callable[[str], object] = webbrowser.open,
    ) -> None:
        """Initialize the notifier.

        Args:
            renderer: Host that displays the notifications.
            settings: Application settings, defaults to the global settings.
            bundle: Message bundle, defaults to the global bundle.
            settings_surface: Host entry point for the plugin settings action.
            url_opener: Callable used by the install docs action.
        """
        settings = settings or get_settings()
        self.renderer = renderer
        self.bundle = bundle or get_message_bundle()
        self.install_docs_url = settings.plugin.install_docs_url
        self.settings_surface = settings_surface
        self.formatter = TraceFormatter(self.bundle, max_cause_depth=settings.max_cause_depth)
        self._url_opener = url_opener

    @property
    def default_title(self) -> str:
        """Title used when a caller doesn't provide one."""
        return self.bundle.message("plugin.name")

    def info(self, context: object, body: str, *, title: str | None = None) -> None:
        """Show an informational notification."""
        self._dispatch(context, self._build(body, Severity.INFO, Channel.INTERACTIVE, title))

    def warning(self, context: object, body: str, *, title: str | None = None) -> None:
        """Show a warning notification."""
        self._dispatch(context, self._build(body, Severity.WARNING, Channel.INTERACTIVE, title))

    def error(self, context: object, body: str, *, title: str | None = None) -> None:
        """Show an error notification."""
        self._dispatch(context, self._build(body, Severity.ERROR, Channel.INTERACTIVE, title))

    def exception(self, context: object, error: BaseException) -> None:
        """Log a caught exception without interrupting the user.

        Args:
            context: Display context.
            error: The caught exception.
        """
        request = self._build(
            self.formatter.format(error),
            Severity.ERROR,
            Channel.LOG_ONLY,
            self.bundle.message("plugin.exception"),
        )
        self._dispatch(context, request)

    def tool_unavailable(self, context: object) -> None:
        """Tell the user Pylint could not be found and how to fix it.

        The notification carries two actions: open the installation docs,
        then open the plugin settings.
        """
        actions = (
            open_install_docs_action(
                self.bundle.message("plugin.notification.action.how-to-install-pylint"),
                self.install_docs_url,
                self._url_opener,
            ),
            open_plugin_settings_action(
                self.bundle.message("plugin.notification.action.plugin-settings"),
                self.settings_surface,
            ),
        )
        request = self._build(
            self.bundle.message("plugin.notification.pylint-not-found.content"),
            Severity.ERROR,
            Channel.INTERACTIVE,
            subtitle=self.bundle.message("plugin.notification.pylint-not-found.subtitle"),
            actions=actions,
        )
        self._dispatch(context, request)

    def _build(
        self,
        body: str,
        severity: Severity,
        channel: Channel,
        title: str | None = None,
        *,
        subtitle: str | None = None,
        actions: tuple[Action, ...] = (),
    ) -> NotificationRequest:
        if not isinstance(body, str) or not body.strip():
            raise InvalidRequestError(f"{severity.value} notification requires a non-empty body")
        return NotificationRequest(
            title=title or self.default_title,
            body=body,
            severity=severity,
            channel=channel,
            subtitle=subtitle,
            actions=actions,
        )

    def _dispatch(self, context: object, request: NotificationRequest) -> None:
        group = get_notification_groups(self.bundle)[request.channel]
        logger.debug(
            f"Dispatching {request.severity.value} notification to "
            f"{group.display_id} via {self.renderer.name}"
        )
        self.renderer.render(context, group, request)
