"""Interactive shell for a shortening session

Commands operate on a single ShortenerSession which lives until the shell
exits; nothing is kept afterwards.
"""

import shlex
import logging
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from sessionshortener.exceptions import SessionShortenerError
from sessionshortener.session import ShortenerSession
from sessionshortener.cli.render import (
    render_entries,
    render_results,
    render_statistics,
    render_notification,
)


logger = logging.getLogger(__name__)

# Shell field names mapped onto PendingEntry attributes
FIELD_ALIASES = {
    'url': 'original',
    'original': 'original',
    'expiry': 'expiry_minutes',
    'expiry_minutes': 'expiry_minutes',
    'code': 'custom_code',
    'custom_code': 'custom_code',
}

COMMANDS_HELP = [
    ('add', 'Add an empty URL entry'),
    ('set <n> <url|expiry|code> <value>', 'Edit a field of entry n (empty value with "")'),
    ('remove <n>', 'Remove entry n'),
    ('entries', 'Show pending entries'),
    ('shorten', 'Shorten all pending entries'),
    ('list', 'Show shortened URLs'),
    ('click <code>', 'Simulate a click on a short URL'),
    ('stats', 'Show click statistics'),
    ('help', 'Show this help message'),
    ('quit', 'Exit the shell'),
]


class InteractiveShell:
    """Interactive shell driving a ShortenerSession."""

    def __init__(self, session: ShortenerSession, console: Console | None = None, read_line: Callable[[str], str] | None = None):
        self.session = session
        self.console = console or Console()
        self.read_line = read_line or (lambda prompt: Prompt.ask(prompt, console=self.console))
        self.running = True

        self.commands: dict[str, Callable[[list[str]], None]] = {
            'add': self.add_entry,
            'set': self.set_field,
            'remove': self.remove_entry,
            'rm': self.remove_entry,
            'entries': self.show_entries,
            'shorten': self.shorten,
            'list': self.show_results,
            'ls': self.show_results,
            'click': self.click,
            'stats': self.show_statistics,
            'help': self.show_help,
            '?': self.show_help,
            'quit': self.exit_shell,
            'exit': self.exit_shell,
        }

    # -------------------------------
    # Commands
    # -------------------------------

    def add_entry(self, args: list[str]) -> None:
        if self.session.add_entry() is not None:
            self.show_entries(args)

    def set_field(self, args: list[str]) -> None:
        if len(args) != 3:
            self.print_error('Usage: set <n> <url|expiry|code> <value>')
            return

        position, field, value = args
        if field.lower() not in FIELD_ALIASES:
            self.print_error(f"Unknown field '{field}' (expected url, expiry or code).")
            return

        self.session.update_entry(self._index(position), FIELD_ALIASES[field.lower()], value)
        self.show_entries([])

    def remove_entry(self, args: list[str]) -> None:
        if len(args) != 1:
            self.print_error('Usage: remove <n>')
            return
        self.session.remove_entry(self._index(args[0]))
        self.show_entries([])

    def show_entries(self, args: list[str]) -> None:
        self.console.print(render_entries(self.session.entries))

    def shorten(self, args: list[str]) -> None:
        outcome = self.session.shorten()
        if outcome.ok:
            self.show_results([])
        else:
            self.show_entries([])

    def show_results(self, args: list[str]) -> None:
        self.console.print(render_results(self.session.results()))

    def click(self, args: list[str]) -> None:
        if len(args) != 1:
            self.print_error('Usage: click <code>')
            return
        self.session.simulate_click(args[0])

    def show_statistics(self, args: list[str]) -> None:
        self.console.print(render_statistics(self.session.statistics()))

    def show_help(self, args: list[str]) -> None:
        table = Table(title='Available Commands', show_header=True, header_style='bold magenta')
        table.add_column('Command', style='cyan')
        table.add_column('Description')
        for command, description in COMMANDS_HELP:
            table.add_row(command, description)
        self.console.print(table)

    def exit_shell(self, args: list[str] | None = None) -> None:
        self.running = False

    # -------------------------------
    # Loop
    # -------------------------------

    def parse_command(self, command_line: str) -> tuple[str, list[str]]:
        try:
            parts = shlex.split(command_line)
        except ValueError:
            parts = command_line.split()
        if not parts:
            return '', []
        return parts[0].lower(), parts[1:]

    def run_command(self, command: str, args: list[str]) -> None:
        func = self.commands.get(command)
        if func is None:
            self.print_error(f'Unknown command: {command}')
            self.console.print("Type 'help' for available commands.")
            return

        try:
            func(args)
        except (SessionShortenerError, IndexError, ValueError) as e:
            logger.debug('Command failed.', extra={'command': command, 'error': str(e)})
            self.print_error(str(e))

        self.show_notification()

    def show_notification(self) -> None:
        banner = render_notification(self.session.notification)
        if banner is not None:
            self.console.print(banner)
            self.session.dismiss_notification()

    def run(self) -> None:
        self.console.print("[bold blue]URL Shortener[/bold blue] - type 'help' for commands")
        self.show_entries([])

        while self.running:
            try:
                command_line = self.read_line('[bold blue]shortener[/bold blue]>').strip()
            except (EOFError, KeyboardInterrupt):
                self.exit_shell()
                break

            command, args = self.parse_command(command_line)
            if command:
                self.run_command(command, args)

    def print_error(self, message: str) -> None:
        self.console.print(f'[red]✗[/red] {escape(message)}')

    def _index(self, position: str) -> int:
        try:
            return int(position) - 1
        except ValueError as e:
            raise ValueError(f"Entry number must be an integer (given value: '{position}').") from e
