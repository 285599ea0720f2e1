"""Process-wide notification group registrations.

One group exists per channel. Groups are created on first use and are
read-only afterwards; concurrent first callers all observe the same
instances.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from pylint_notifications.messages import MessageBundle, get_message_bundle
from pylint_notifications.notifier.models import Channel, NotificationGroup

logger = logging.getLogger(__name__)

GROUP_MESSAGE_KEYS = {
    Channel.INTERACTIVE: "plugin.notification.alerts",
    Channel.LOG_ONLY: "plugin.notification.logging",
}

_lock = threading.Lock()
_groups: Mapping[Channel, NotificationGroup] | None = None


def _build_groups(bundle: MessageBundle) -> Mapping[Channel, NotificationGroup]:
    groups = {
        channel: NotificationGroup(display_id=bundle.message(key), channel=channel)
        for channel, key in GROUP_MESSAGE_KEYS.items()
    }
    logger.debug(f"Registered notification groups: {[g.display_id for g in groups.values()]}")
    return MappingProxyType(groups)


def get_notification_groups(
    bundle: MessageBundle | None = None,
) -> Mapping[Channel, NotificationGroup]:
    """Get the notification groups, creating them on first use.

    Args:
        bundle: Bundle used to name the groups. Only consulted by the call
            that creates them.

    Returns:
        Read-only mapping from channel to its group.
    """
    global _groups
    groups = _groups
    if groups is None:
        with _lock:
            if _groups is None:
                _groups = _build_groups(bundle or get_message_bundle())
            groups = _groups
    return groups


def reset_notification_groups() -> None:
    """Forget the registered groups.

    Useful for testing group creation.
    """
    global _groups
    with _lock:
        _groups = None
