"""Command-line interface: click commands, interactive shell and rich rendering."""
