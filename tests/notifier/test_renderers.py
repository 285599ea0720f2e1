"""Tests for renderer implementations."""

import logging
from unittest.mock import MagicMock, patch

import httpx
import pytest

from pylint_notifications.notifier.actions import (
    open_install_docs_action,
    open_plugin_settings_action,
)
from pylint_notifications.notifier.dispatcher import RenderingUnavailableError
from pylint_notifications.notifier.models import (
    Channel,
    NotificationGroup,
    NotificationRequest,
    Severity,
)
from pylint_notifications.notifier.renderers.http import HttpRenderer
from pylint_notifications.notifier.renderers.log import DEFAULT_LOGGER_NAME, LogRenderer

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def alerts_group() -> NotificationGroup:
    """Create the interactive group."""
    return NotificationGroup(display_id="Pylint alerts", channel=Channel.INTERACTIVE)


@pytest.fixture
def sample_request() -> NotificationRequest:
    """Create a sample notification request."""
    return NotificationRequest(
        title="Pylint",
        body="Line one<br>&nbsp;&nbsp;x &lt; y",
        severity=Severity.WARNING,
        channel=Channel.INTERACTIVE,
    )


@pytest.fixture
def request_with_actions() -> NotificationRequest:
    """Create a request carrying remediation actions."""
    return NotificationRequest(
        title="Pylint",
        subtitle="Pylint not found",
        body="Install Pylint",
        severity=Severity.ERROR,
        channel=Channel.INTERACTIVE,
        actions=(
            open_install_docs_action("How to install Pylint", "https://docs.example.com"),
            open_plugin_settings_action("Plugin settings", None),
        ),
    )


def mock_http_client(mock_client_class: MagicMock) -> MagicMock:
    """Wire a mock httpx.Client usable as a context manager."""
    mock_client = MagicMock()
    mock_client.__enter__.return_value = mock_client
    mock_client.__exit__.return_value = None
    mock_client_class.return_value = mock_client
    return mock_client


# ============================================================================
# LogRenderer Tests
# ============================================================================


class TestLogRenderer:
    """Tests for the logging renderer."""

    def test_name(self) -> None:
        """Test renderer name."""
        assert LogRenderer().name == "log"

    @pytest.mark.parametrize(
        ("severity", "level"),
        [
            (Severity.INFO, logging.INFO),
            (Severity.WARNING, logging.WARNING),
            (Severity.ERROR, logging.ERROR),
        ],
    )
    def test_level_follows_severity(
        self,
        caplog: pytest.LogCaptureFixture,
        alerts_group: NotificationGroup,
        severity: Severity,
        level: int,
    ) -> None:
        """Test records are logged at the severity's level."""
        request = NotificationRequest(
            title="Pylint", body="Done", severity=severity, channel=Channel.INTERACTIVE
        )

        with caplog.at_level(logging.DEBUG, logger=DEFAULT_LOGGER_NAME):
            LogRenderer().render("project", alerts_group, request)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == level
        assert caplog.records[0].getMessage() == "[Pylint alerts] Pylint: Done"

    def test_markup_converted_to_text(
        self,
        caplog: pytest.LogCaptureFixture,
        alerts_group: NotificationGroup,
        sample_request: NotificationRequest,
    ) -> None:
        """Test body markup is turned back into plain text."""
        with caplog.at_level(logging.DEBUG, logger=DEFAULT_LOGGER_NAME):
            LogRenderer().render("project", alerts_group, sample_request)

        message = caplog.records[0].getMessage()
        assert message.endswith("Line one\n\xa0\xa0x < y")

    def test_context_attached(
        self,
        caplog: pytest.LogCaptureFixture,
        alerts_group: NotificationGroup,
        sample_request: NotificationRequest,
    ) -> None:
        """Test context and channel are available to log handlers."""
        context = object()
        with caplog.at_level(logging.DEBUG, logger=DEFAULT_LOGGER_NAME):
            LogRenderer().render(context, alerts_group, sample_request)

        record = caplog.records[0]
        assert record.notification_context is context
        assert record.notification_channel == "interactive"

    def test_subtitle_and_actions(
        self,
        caplog: pytest.LogCaptureFixture,
        alerts_group: NotificationGroup,
        request_with_actions: NotificationRequest,
    ) -> None:
        """Test subtitle and action labels are logged."""
        with caplog.at_level(logging.DEBUG, logger=DEFAULT_LOGGER_NAME):
            LogRenderer().render("project", alerts_group, request_with_actions)

        assert "Pylint - Pylint not found: Install Pylint" in caplog.records[0].getMessage()
        assert "How to install Pylint, Plugin settings" in caplog.records[1].getMessage()

    def test_custom_logger(
        self,
        caplog: pytest.LogCaptureFixture,
        alerts_group: NotificationGroup,
        sample_request: NotificationRequest,
    ) -> None:
        """Test records go to the configured logger."""
        with caplog.at_level(logging.DEBUG, logger="ide.events"):
            LogRenderer("ide.events").render("project", alerts_group, sample_request)

        assert caplog.records[0].name == "ide.events"


# ============================================================================
# HttpRenderer Tests
# ============================================================================


class TestHttpRenderer:
    """Tests for the HTTP renderer."""

    def test_init(self) -> None:
        """Test renderer initialization."""
        renderer = HttpRenderer("http://localhost:63342/notify", timeout=2.0)
        assert renderer.url == "http://localhost:63342/notify"
        assert renderer.timeout == 2.0
        assert renderer.name == "http"

    def test_render_success(
        self,
        alerts_group: NotificationGroup,
        request_with_actions: NotificationRequest,
    ) -> None:
        """Test the notification is posted once."""
        renderer = HttpRenderer("http://localhost:63342/notify")

        with patch("httpx.Client") as mock_client_class:
            mock_client = mock_http_client(mock_client_class)
            mock_client.post.return_value = MagicMock(status_code=204)

            renderer.render("project-1", alerts_group, request_with_actions)

            mock_client.post.assert_called_once()
            url = mock_client.post.call_args.args[0]
            payload = mock_client.post.call_args.kwargs["json"]

        assert url == "http://localhost:63342/notify"
        assert payload["context"] == "project-1"
        assert payload["group"] == "Pylint alerts"
        assert payload["notification"] == {
            "title": "Pylint",
            "subtitle": "Pylint not found",
            "body": "Install Pylint",
            "severity": "error",
            "channel": "interactive",
            "actions": [
                {"kind": "open_install_docs", "label": "How to install Pylint"},
                {"kind": "open_plugin_settings", "label": "Plugin settings"},
            ],
            "open_urls": True,
        }

    def test_open_urls_passed_through(self, alerts_group: NotificationGroup) -> None:
        """Test the host is told whether to open body links."""
        renderer = HttpRenderer("http://localhost:63342/notify")
        request = NotificationRequest(
            title="Pylint",
            body="See https://pylint.org",
            severity=Severity.INFO,
            channel=Channel.INTERACTIVE,
            open_urls=False,
        )

        with patch("httpx.Client") as mock_client_class:
            mock_client = mock_http_client(mock_client_class)
            mock_client.post.return_value = MagicMock(status_code=200)

            renderer.render("project", alerts_group, request)

            payload = mock_client.post.call_args.kwargs["json"]

        assert payload["notification"]["open_urls"] is False

    def test_render_rejected(
        self,
        alerts_group: NotificationGroup,
        sample_request: NotificationRequest,
    ) -> None:
        """Test a non-2xx response raises without retrying."""
        renderer = HttpRenderer("http://localhost:63342/notify")

        with patch("httpx.Client") as mock_client_class:
            mock_client = mock_http_client(mock_client_class)
            mock_client.post.return_value = MagicMock(status_code=410, text="Project disposed")

            with pytest.raises(RenderingUnavailableError, match="410 Project disposed"):
                renderer.render("project", alerts_group, sample_request)

            mock_client.post.assert_called_once()

    def test_render_unreachable(
        self,
        alerts_group: NotificationGroup,
        sample_request: NotificationRequest,
    ) -> None:
        """Test transport errors become RenderingUnavailableError."""
        renderer = HttpRenderer("http://localhost:63342/notify")

        with patch("httpx.Client") as mock_client_class:
            mock_client = mock_http_client(mock_client_class)
            mock_client.post.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(RenderingUnavailableError, match="unreachable") as exc_info:
                renderer.render("project", alerts_group, sample_request)

            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
            mock_client.post.assert_called_once()
