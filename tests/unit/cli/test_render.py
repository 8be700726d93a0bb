"""Unit tests for the pure rendering functions in cli/render.py."""

from datetime import datetime, UTC

from sessionshortener.constants import Severity
from sessionshortener.models import PendingEntry, ShortenedResult, ClickEvent, StatisticsRow, Notification
from sessionshortener.cli.render import (
    render_entries,
    render_results,
    render_statistics,
    render_notification,
)


CREATED_AT = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


def rendered(console, renderable) -> str:
    console.print(renderable)
    return console.file.getvalue()


def test_render_entries(console):
    entries = [PendingEntry(original='not-a-url', error='Invalid URL'), PendingEntry(original='https://example.com', custom_code='mine')]

    output = rendered(console, render_entries(entries))

    assert 'Pending URLs' in output
    assert 'not-a-url' in output
    assert 'Invalid URL' in output
    assert 'mine' in output


def test_render_results(console):
    results = (
        ShortenedResult(shortcode='abc123', original='https://example.com', expires_at='never', created_at=CREATED_AT),
        ShortenedResult(shortcode='def456', original='https://example.org', expires_at=datetime(2026, 1, 1, 12, 30, tzinfo=UTC), created_at=CREATED_AT),
    )

    output = rendered(console, render_results(results))

    assert 'abc123' in output
    assert 'Never' in output
    assert '2026-01-01 12:30:00 UTC' in output
    assert '2026-01-01 12:00:00 UTC' in output


def test_render_statistics(console):
    click = ClickEvent(timestamp=datetime(2026, 1, 1, 13, 0, tzinfo=UTC), source='localhost', location='India')
    rows = (
        StatisticsRow(shortcode='abc123', click_count=1, expires_at='never', clicks=(click,)),
        StatisticsRow(shortcode='def456', click_count=0, expires_at='never', clicks=()),
    )

    output = rendered(console, render_statistics(rows))

    assert 'Short Code: abc123' in output
    assert 'Clicks: 1' in output
    assert 'Time: 2026-01-01 13:00:00 UTC, Source: localhost, Location: India' in output
    assert 'No clicks recorded yet.' in output


def test_render_statistics_empty(console):
    assert 'No shortened URLs yet.' in rendered(console, render_statistics(()))


def test_render_notification_open():
    banner = render_notification(Notification(message='Max 5 URLs allowed', severity=Severity.WARNING, open=True))
    assert banner.plain == 'Max 5 URLs allowed'
    assert banner.style == 'yellow'


def test_render_notification_closed():
    assert render_notification(Notification(message='gone', open=False)) is None


def test_bracketed_user_text_is_rendered_literally(console):
    entries = [PendingEntry(original='https://example.com/[/x]', custom_code='[bold]me', error='Invalid URL')]
    results = (ShortenedResult(shortcode='[red]x', original='https://example.com/[bold]y', expires_at='never', created_at=CREATED_AT),)
    click = ClickEvent(timestamp=CREATED_AT, source='[/src]', location='[dim]here')
    rows = (StatisticsRow(shortcode='[/code]', click_count=1, expires_at='never', clicks=(click,)),)

    console.print(render_entries(entries))
    console.print(render_results(results))
    output = rendered(console, render_statistics(rows))

    assert 'https://example.com/[/x]' in output
    assert '[bold]me' in output
    assert '[red]x' in output
    assert 'https://example.com/[bold]y' in output
    assert 'Short Code: [/code]' in output
    assert 'Source: [/src], Location: [dim]here' in output
