"""CLI commands for focusrest."""
