"""HTTP renderer implementation for a remote rendering host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from pylint_notifications.notifier.dispatcher import RenderingUnavailableError

if TYPE_CHECKING:
    from pylint_notifications.notifier.models import NotificationGroup, NotificationRequest

logger = logging.getLogger(__name__)


class HttpRenderer:
    """Forwards notifications to a rendering host over HTTP.

    Each notification is posted once; a failed delivery is reported to the
    caller and never retried.
    """

    def __init__(self, url: str, *, timeout: float = 5.0) -> None:
        """Initialize the renderer.

        Args:
            url: Endpoint of the rendering host.
            timeout: HTTP request timeout in seconds.
        """
        self.url = url
        self.timeout = timeout
        self.name = "http"

    def render(
        self,
        context: object,
        group: NotificationGroup,
        request: NotificationRequest,
    ) -> None:
        """Post the notification to the rendering host.

        Raises:
            RenderingUnavailableError: If the host is unreachable or
                rejects the notification.
        """
        payload = {
            "context": str(context),
            "group": group.display_id,
            "notification": request.to_dict(),
        }

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise RenderingUnavailableError(f"Rendering host unreachable: {e}") from e

        if not 200 <= response.status_code < 300:
            raise RenderingUnavailableError(
                f"Rendering host rejected notification: {response.status_code} {response.text}"
            )

        logger.debug(f"Notification delivered to {self.url}")
