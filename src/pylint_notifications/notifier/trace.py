"""Exception trace formatting for markup-rendering notification bodies.

Traces are rendered as single-line markup: tabs become a fixed-width
``&nbsp;`` indent and line breaks become ``<br>``, so the result can be
embedded verbatim in an HTML-rendering notification.
"""

from __future__ import annotations

import html
import logging
import re
import traceback

from pylint_notifications.messages import MessageBundle, get_message_bundle
from pylint_notifications.notifier.models import ExceptionReport

logger = logging.getLogger(__name__)

TAB_MARKUP = "&nbsp;&nbsp;"
LINE_BREAK_MARKUP = "<br>"

DEFAULT_MAX_CAUSE_DEPTH = 64

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class CauseChainTooLongError(Exception):
    """Raised when a cause chain is cyclic or exceeds the traversal bound."""


def message_of(error: BaseException) -> str:
    """Return the error's message, falling back to its type name."""
    try:
        message = str(error)
    except Exception:
        return f"<{type(error).__name__} str() failed>"
    return message or type(error).__name__


def to_markup(text: str) -> str:
    """Escape text and replace tabs and line breaks with markup."""
    escaped = html.escape(text, quote=False).replace("\t", TAB_MARKUP)
    return _LINE_BREAK_RE.sub(LINE_BREAK_MARKUP, escaped)


def render_trace(error: BaseException, *, chain: bool = True) -> str:
    """Render an error's message and traceback as single-line markup.

    Args:
        error: The error to render.
        chain: Include chained causes and contexts in the traceback.

    Returns:
        Markup string without tab or newline characters.
    """
    trace = "".join(traceback.format_exception(error, chain=chain))
    return to_markup(f"{message_of(error)}\n{trace}")


def cause_of(error: BaseException) -> BaseException | None:
    """Return the error that caused this one, if any.

    An explicit ``raise ... from`` cause wins; otherwise the exception being
    handled when this one was raised counts, unless it was suppressed.
    """
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def root_cause(error: BaseException, max_depth: int = DEFAULT_MAX_CAUSE_DEPTH) -> BaseException:
    """Follow the cause chain to its terminal, cause-less error.

    Args:
        error: Where to start.
        max_depth: Maximum number of cause links to follow.

    Returns:
        The root cause, or ``error`` itself if it has no cause.

    Raises:
        CauseChainTooLongError: If the chain is cyclic or longer than max_depth.
    """
    current = error
    seen = {id(error)}
    for _ in range(max_depth):
        cause = cause_of(current)
        if cause is None:
            return current
        if id(cause) in seen:
            raise CauseChainTooLongError(f"Cause chain of {type(error).__name__} is cyclic")
        seen.add(id(cause))
        current = cause

    if cause_of(current) is None:
        return current
    raise CauseChainTooLongError(
        f"Cause chain of {type(error).__name__} exceeds {max_depth} links"
    )


class TraceFormatter:
    """Turns caught exceptions into notification body text.

    An error with a cause is summarized by its own message followed by the
    trace of its root cause, which is usually more telling than any of the
    wrappers in between. A cause-less error is shown with its own trace.
    """

    def __init__(
        self,
        bundle: MessageBundle | None = None,
        *,
        max_cause_depth: int = DEFAULT_MAX_CAUSE_DEPTH,
    ) -> None:
        """Initialize the formatter.

        Args:
            bundle: Message bundle for the root cause template.
            max_cause_depth: Maximum number of cause links to follow.
        """
        self.bundle = bundle or get_message_bundle()
        self.max_cause_depth = max_cause_depth

    def report(self, error: BaseException) -> ExceptionReport:
        """Build the exception report for an error."""
        summary = message_of(error)
        if cause_of(error) is None:
            return ExceptionReport(summary_message=summary, own_trace=render_trace(error))

        try:
            root = root_cause(error, self.max_cause_depth)
        except CauseChainTooLongError as e:
            logger.warning(f"Reporting {type(error).__name__} without root cause: {e}")
            return ExceptionReport(
                summary_message=summary,
                own_trace=render_trace(error, chain=False),
            )

        return ExceptionReport(
            summary_message=summary,
            own_trace=render_trace(error, chain=False),
            cause_trace=render_trace(root),
        )

    def format(self, error: BaseException) -> str:
        """Format an error as notification body markup."""
        report = self.report(error)
        if report.cause_trace is None:
            return report.own_trace
        return self.bundle.message(
            "pylint.exception-with-root-cause",
            to_markup(report.summary_message),
            report.cause_trace,
        )
