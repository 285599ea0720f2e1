"""Renderer implementations that display notifications."""

from pylint_notifications.notifier.renderers.http import HttpRenderer
from pylint_notifications.notifier.renderers.log import LogRenderer

__all__ = [
    "HttpRenderer",
    "LogRenderer",
]
