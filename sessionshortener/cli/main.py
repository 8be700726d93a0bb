"""Main CLI entry point for sessionshortener.

Commands:
    shorten  - shorten up to five URLs in one batch and print the results
    shell    - start an interactive session (add, edit, shorten, click, stats)
"""

import logging

import click
from rich.console import Console

from sessionshortener import __version__
from sessionshortener.exceptions import SessionShortenerError
from sessionshortener.session import ShortenerSession
from sessionshortener.utils.config import Settings, load_config
from sessionshortener.utils.logging import initialize_logging
from sessionshortener.cli.interactive import InteractiveShell
from sessionshortener.cli.render import render_entries, render_results, render_notification


logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', default=None, help='Override the LOG_LEVEL environment variable')
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """In-memory URL shortener demo."""
    try:
        settings = load_config()
    except SessionShortenerError as e:
        raise click.ClickException(str(e)) from e

    initialize_logging(level=log_level or settings.log_level, app_env=settings.app_env)
    ctx.obj = settings


@main.command()
@click.argument('urls', nargs=-1, required=True)
@click.option('--expiry', '-e', 'expiries', multiple=True, help='Expiry in minutes, paired in order with the URLs')
@click.option('--code', '-c', 'codes', multiple=True, help='Custom short code, paired in order with the URLs')
@click.pass_obj
def shorten(settings: Settings, urls: tuple[str, ...], expiries: tuple[str, ...], codes: tuple[str, ...]):
    """Shorten URLS as one batch."""
    if len(urls) > settings.max_pending_entries:
        raise click.UsageError(f'Max {settings.max_pending_entries} URLs allowed (given {len(urls)}).')
    if len(expiries) > len(urls) or len(codes) > len(urls):
        raise click.UsageError('More --expiry/--code values than URLs.')

    console = Console()
    session = ShortenerSession(settings=settings)
    for index, url in enumerate(urls):
        if index > 0:
            session.add_entry()
        session.update_entry(index, 'original', url)
        if index < len(expiries):
            session.update_entry(index, 'expiry_minutes', expiries[index])
        if index < len(codes):
            session.update_entry(index, 'custom_code', codes[index])

    try:
        outcome = session.shorten()
    except SessionShortenerError as e:
        raise click.ClickException(str(e)) from e

    if outcome.ok:
        console.print(render_results(session.results()))
    else:
        console.print(render_entries(session.entries))
    banner = render_notification(session.notification)
    if banner is not None:
        console.print(banner)

    if not outcome.ok:
        click.get_current_context().exit(1)


@main.command()
@click.pass_obj
def shell(settings: Settings):
    """Start an interactive shortening session."""
    InteractiveShell(ShortenerSession(settings=settings)).run()
