"""Display message lookup.

Messages are addressed by key and may carry positional ``{0}``, ``{1}``
placeholders that are filled from the arguments passed to
:meth:`MessageBundle.message`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: dict[str, str] = {
    "plugin.name": "Pylint",
    "plugin.notification.alerts": "Pylint alerts",
    "plugin.notification.logging": "Pylint logging",
    "plugin.exception": "Unexpected Exception Caught",
    "pylint.exception-with-root-cause": (
        "The Pylint plugin encountered an error: {0}<br><br>Root cause:<br>{1}"
    ),
    "plugin.notification.pylint-not-found.subtitle": "Pylint not found",
    "plugin.notification.pylint-not-found.content": (
        "The Pylint executable could not be located. "
        "Install Pylint or set its path in the plugin settings."
    ),
    "plugin.notification.action.how-to-install-pylint": "How to install Pylint",
    "plugin.notification.action.plugin-settings": "Plugin settings",
}


class MessageBundle:
    """Resolves message keys to display strings.

    Unknown keys resolve to ``!key!`` so a missing translation shows up in
    the UI instead of breaking the notification that needed it.
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        """Initialize the bundle.

        Args:
            messages: Overrides layered on top of the default messages.
        """
        self._messages = dict(DEFAULT_MESSAGES)
        if messages:
            self._messages.update(messages)

    def message(self, key: str, *args: object) -> str:
        """Resolve a message key.

        Args:
            key: Message key.
            *args: Values substituted for the positional placeholders.

        Returns:
            The display string.
        """
        template = self._messages.get(key)
        if template is None:
            logger.warning(f"Missing message for key {key!r}")
            return f"!{key}!"
        if not args:
            return template
        return template.format(*args)


@lru_cache(maxsize=1)
def get_message_bundle() -> MessageBundle:
    """Get the default message bundle."""
    return MessageBundle()
