"""Main entry point for focusrest."""

import typer

from focusrest import __version__
from focusrest.commands import config
from focusrest.commands.run import run_tracker
from focusrest.utils.logger import log_file_path
from focusrest.utils.ui.formatters import console

app = typer.Typer(
    name="focusrest",
    help="Track time spent in Focus and Rest from the terminal",
    no_args_is_help=True,
)

app.add_typer(config.app, name="config", help="Configuration management")
app.command("run")(run_tracker)


@app.command()
def version() -> None:
    """Show version information and where logs are written."""
    console.print(f"[bold]focusrest[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Log file: {log_file_path()}[/dim]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
