"""Unit tests for the InteractiveShell in cli/interactive.py.

Test coverage includes:

1. Full session flow (set, shorten, list, click, stats)
2. Collector commands (add, remove, capacity warning)
3. Error reporting for bad input
4. Loop termination (quit, EOF)
"""

from sessionshortener.cli.interactive import InteractiveShell
from sessionshortener.session import ShortenerSession


def draws(*codes: str):
    return iter(codes).__next__


def run_shell(console, script, *lines: str) -> tuple[InteractiveShell, str]:
    shell = InteractiveShell(ShortenerSession(draw=draws('aaaaaa', 'bbbbbb')), console=console, read_line=script(*lines))
    shell.run()
    return shell, console.file.getvalue()


# -------------------------------
# 1. Full flow
# -------------------------------


def test_shorten_click_and_stats(console, script):
    shell, output = run_shell(
        console,
        script,
        'set 1 url https://example.com',
        'set 1 expiry 30',
        'shorten',
        'click aaaaaa',
        'click aaaaaa',
        'stats',
        'quit',
    )

    assert 'URLs shortened successfully!' in output
    assert 'Short Code: aaaaaa' in output
    assert 'Clicks: 2' in output
    assert 'Source: localhost, Location: India' in output
    assert shell.session.statistics()[0].click_count == 2
    assert shell.running is False


def test_list_shows_results(console, script):
    _, output = run_shell(console, script, 'set 1 url https://example.com', 'shorten', 'list')

    assert output.count('aaaaaa') >= 2
    assert 'Never' in output


def test_stats_without_clicks(console, script):
    _, output = run_shell(console, script, 'set 1 url https://example.com', 'shorten', 'stats')
    assert 'No clicks recorded yet.' in output


def test_rejected_batch_shows_errors(console, script):
    shell, output = run_shell(console, script, 'set 1 url not-a-url', 'shorten')

    assert 'Invalid URL' in output
    assert 'Please correct the errors.' in output
    assert len(shell.session.store) == 0


# -------------------------------
# 2. Collector commands
# -------------------------------


def test_add_until_capacity_warns(console, script):
    shell, output = run_shell(console, script, 'add', 'add', 'add', 'add', 'add')

    assert len(shell.session.entries) == 5
    assert 'Max 5 URLs allowed' in output


def test_remove_entry(console, script):
    shell, _ = run_shell(console, script, 'add', 'set 2 url https://example.org', 'rm 1')
    assert [entry.original for entry in shell.session.entries] == ['https://example.org']


def test_quoted_empty_value_clears_field(console, script):
    shell, _ = run_shell(console, script, 'set 1 code mine', 'set 1 code ""')
    assert shell.session.entries[0].custom_code == ''


# -------------------------------
# 3. Error reporting
# -------------------------------


def test_unknown_command(console, script):
    _, output = run_shell(console, script, 'frobnicate')
    assert 'Unknown command: frobnicate' in output


def test_set_with_bad_arguments(console, script):
    _, output = run_shell(console, script, 'set 1 url', 'set 1 colour red', 'set x url https://example.com', 'set 9 url https://example.com')

    assert 'Usage: set <n> <url|expiry|code> <value>' in output
    assert "Unknown field 'colour'" in output
    assert "Entry number must be an integer (given value: 'x')" in output
    assert 'No pending entry at position 9' in output


def test_click_usage(console, script):
    _, output = run_shell(console, script, 'click')
    assert 'Usage: click <code>' in output


def test_help_lists_commands(console, script):
    _, output = run_shell(console, script, 'help')
    assert 'Available Commands' in output
    assert 'shorten' in output


# -------------------------------
# 4. Loop termination
# -------------------------------


def test_eof_stops_the_shell(console, script):
    shell, _ = run_shell(console, script)
    assert shell.running is False


def test_commands_after_quit_are_ignored(console, script):
    shell, _ = run_shell(console, script, 'quit', 'add')
    assert len(shell.session.entries) == 1


def test_bracketed_url_and_code_keep_the_shell_running(console, script):
    shell, output = run_shell(
        console,
        script,
        'set 1 url https://example.com/[/x]',
        'set 1 code [b]c',
        'entries',
        'shorten',
        'list',
        'click [b]c',
        'stats',
    )

    assert 'https://example.com/[/x]' in output
    assert 'Short Code: [b]c' in output
    assert 'Clicks: 1' in output
    assert shell.session.statistics()[0].click_count == 1
