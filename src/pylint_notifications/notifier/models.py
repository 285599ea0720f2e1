"""Data models for the notifier module."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """Visual importance of a notification."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Channel(Enum):
    """Delivery mode of a notification."""

    INTERACTIVE = "interactive"
    LOG_ONLY = "log_only"


class ActionKind(Enum):
    """Remediation actions that can be attached to a notification."""

    OPEN_INSTALL_DOCS = "open_install_docs"
    OPEN_PLUGIN_SETTINGS = "open_plugin_settings"


@dataclass(frozen=True)
class Action:
    """A labeled remediation the user can trigger from a notification.

    The effect is run by the rendering host when the user interacts with
    the action; it receives the host's interaction event, if any.

    Attributes:
        kind: Which remediation this is.
        label: Display label.
        effect: Callable run on user interaction.
    """

    kind: ActionKind
    label: str
    effect: Callable[[object | None], None] = field(compare=False, repr=False)

    def perform(self, event: object | None = None) -> None:
        """Run the action's effect."""
        self.effect(event)

    def to_dict(self) -> dict[str, str]:
        """Serialize for handoff to a remote host."""
        return {"kind": self.kind.value, "label": self.label}


@dataclass(frozen=True)
class NotificationGroup:
    """A channel registration with the rendering host.

    Attributes:
        display_id: Name the host shows for this group.
        channel: Delivery mode of notifications sent through this group.
    """

    display_id: str
    channel: Channel


@dataclass(frozen=True)
class NotificationRequest:
    """A notification ready to be handed to a renderer.

    Attributes:
        title: Notification title.
        body: Display body, may contain ``<br>`` markup.
        severity: Visual importance.
        channel: Delivery mode.
        subtitle: Optional secondary heading.
        actions: Remediation actions, in display order.
        open_urls: Whether the renderer opens hyperlinks in the body in a
            browser when clicked.
    """

    title: str
    body: str
    severity: Severity
    channel: Channel
    subtitle: str | None = None
    actions: tuple[Action, ...] = ()
    open_urls: bool = True

    def to_dict(self) -> dict[str, object]:
        """Serialize for handoff to a remote host."""
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "body": self.body,
            "severity": self.severity.value,
            "channel": self.channel.value,
            "actions": [action.to_dict() for action in self.actions],
            "open_urls": self.open_urls,
        }


@dataclass(frozen=True)
class ExceptionReport:
    """Display text derived from a caught exception.

    Attributes:
        summary_message: The exception's own message.
        own_trace: Rendered trace of the exception itself.
        cause_trace: Rendered trace of the root cause, if the exception
            was caused by another one.
    """

    summary_message: str
    own_trace: str
    cause_trace: str | None = None

    @property
    def has_root_cause(self) -> bool:
        """Return True if a root cause trace is available."""
        return self.cause_trace is not None
