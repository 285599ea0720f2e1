"""Notifier layer - notification dispatch and exception reporting."""

from pylint_notifications.notifier.dispatcher import (
    InvalidRequestError,
    NotificationRenderer,
    Notifier,
    NotifierError,
    RenderingUnavailableError,
)
from pylint_notifications.notifier.models import (
    Action,
    ActionKind,
    Channel,
    ExceptionReport,
    NotificationGroup,
    NotificationRequest,
    Severity,
)
from pylint_notifications.notifier.renderers.http import HttpRenderer
from pylint_notifications.notifier.renderers.log import LogRenderer
from pylint_notifications.notifier.trace import TraceFormatter

__all__ = [
    "Action",
    "ActionKind",
    "Channel",
    "ExceptionReport",
    "HttpRenderer",
    "InvalidRequestError",
    "LogRenderer",
    "NotificationGroup",
    "NotificationRenderer",
    "NotificationRequest",
    "Notifier",
    "NotifierError",
    "RenderingUnavailableError",
    "Severity",
    "TraceFormatter",
]
