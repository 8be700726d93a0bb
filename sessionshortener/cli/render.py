"""Pure rendering functions

Each function turns a read-only view of a ShortenerSession into a `rich`
renderable. Nothing here touches session state.
"""

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sessionshortener.constants import Messages, Severity
from sessionshortener.models import PendingEntry, ShortenedResult, StatisticsRow, Notification
from sessionshortener.utils.helpers import format_timestamp


SEVERITY_STYLES = {
    Severity.INFO: 'blue',
    Severity.SUCCESS: 'green',
    Severity.WARNING: 'yellow',
    Severity.ERROR: 'red',
}


def render_entries(entries: list[PendingEntry] | tuple[PendingEntry, ...]) -> Table:
    table = Table(title='Pending URLs', show_header=True, header_style='bold magenta')
    table.add_column('#', style='cyan', justify='right')
    table.add_column('Original URL')
    table.add_column('Expiry (min)')
    table.add_column('Custom Short Code')
    table.add_column('Error', style='red')

    for position, entry in enumerate(entries, start=1):
        table.add_row(str(position), Text(entry.original), Text(entry.expiry_minutes), Text(entry.custom_code), Text(entry.error))
    return table


def render_results(results: tuple[ShortenedResult, ...]) -> Table:
    """Listing view: one row per shortened URL."""
    table = Table(title='Shortened URLs', show_header=True, header_style='bold magenta')
    table.add_column('Short Code', style='cyan')
    table.add_column('Original')
    table.add_column('Expires')
    table.add_column('Created')

    for result in results:
        table.add_row(Text(result.shortcode), Text(result.original), format_timestamp(result.expires_at), format_timestamp(result.created_at))
    return table


def render_statistics_row(row: StatisticsRow) -> Panel:
    lines = [
        Text(f'Clicks: {row.click_count}'),
        Text(f'Expiry: {format_timestamp(row.expires_at)}'),
        Text('Click Details:', style='bold'),
    ]
    if not row.clicks:
        lines.append(Text(Messages.NO_CLICKS, style='dim'))
    for click in row.clicks:
        lines.append(Text.assemble('Time: ', format_timestamp(click.timestamp), ', Source: ', click.source, ', Location: ', click.location))

    return Panel(Group(*lines), title=Text.assemble('Short Code: ', row.shortcode), border_style='blue')


def render_statistics(rows: tuple[StatisticsRow, ...]) -> Group:
    """Statistics view: one panel per shortened URL."""
    if not rows:
        return Group(Text('No shortened URLs yet.', style='dim'))
    return Group(*(render_statistics_row(row) for row in rows))


def render_notification(notification: Notification) -> Text | None:
    if not notification.open:
        return None
    return Text(notification.message, style=SEVERITY_STYLES.get(notification.severity, 'blue'))
