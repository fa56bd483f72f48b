"""Full-screen tracker UI."""

from datetime import timedelta

from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from .commands import CommandDecoder, TrackerCommand, apply_command
from .keyboard import KeyboardHandler
from .state import Mode, SessionTracker


def format_duration(duration: timedelta | None) -> str:
    """Format a duration as zero-padded HH:MM:SS with unbounded hours."""
    if duration is None:
        return "00:00:00"
    total = int(duration.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class TrackerDisplay:
    """Draws the tracker state and runs the interactive loop."""

    def __init__(
        self,
        console: Console | None = None,
        decoder: CommandDecoder | None = None,
        poll_interval: float = 0.1,
        refresh_per_second: int = 10,
        show_help: bool = True,
    ):
        self.console = console or Console()
        self.decoder = decoder or CommandDecoder()
        self.poll_interval = poll_interval
        self.refresh_per_second = refresh_per_second
        self.show_help = show_help

    def create_layout(self, tracker: SessionTracker) -> Layout:
        """Build the totals / current session / help layout."""
        layout = Layout()
        layout.split_column(
            Layout(name="totals", ratio=3),
            Layout(name="current", ratio=3),
            Layout(name="help", ratio=4, visible=self.show_help),
        )
        layout["totals"].split_row(
            *(Layout(name=mode.value) for mode in Mode),
        )

        for mode in Mode:
            layout[mode.value].update(self._create_total_panel(tracker, mode))
        layout["current"].update(self._create_current_panel(tracker))
        layout["help"].update(self._create_help_text())

        return layout

    def _create_total_panel(self, tracker: SessionTracker, mode: Mode) -> Panel:
        title = mode.label
        if mode is tracker.current_mode:
            title += " (Paused)" if tracker.is_paused else " (Active)"

        total = format_duration(tracker.total_elapsed(mode))
        return Panel(Text(f"Total time: {total}"), title=title, title_align="left")

    def _create_current_panel(self, tracker: SessionTracker) -> Panel:
        statuses = [tracker.current_mode.label]
        if tracker.is_paused:
            statuses.append("Paused")
        title = f"Current Session ({', '.join(statuses)})"

        if tracker.is_paused:
            style = "yellow"
        elif tracker.current_mode is Mode.FOCUS:
            style = "bold cyan"
        else:
            style = "bold green"

        elapsed = format_duration(tracker.current_elapsed())
        return Panel(Text(elapsed, style=style), title=title, title_align="left")

    def _create_help_text(self) -> Group:
        keys = {command: key for key, command in self.decoder.bindings.items()}

        lines = [
            f"Press {keys[TrackerCommand.ENTER_FOCUS].upper()} to enter focus",
            f"Press {keys[TrackerCommand.ENTER_REST].upper()} to enter rest",
            f"Press {keys[TrackerCommand.TOGGLE_PAUSE].upper()} to toggle pause",
            f"Type {self.decoder.quit_word} to quit",
        ]
        return Group(*(Text(line, style="dim") for line in lines))

    def run(self, tracker: SessionTracker, keyboard: KeyboardHandler) -> str:
        """
        Run the interactive tracker until the quit word is typed.

        Returns 'quit' or 'interrupted' (Ctrl-C).
        """
        tracker.start()

        try:
            with Live(
                self.create_layout(tracker),
                console=self.console,
                refresh_per_second=self.refresh_per_second,
                screen=True,
            ) as live:
                while True:
                    key = keyboard.get_key(self.poll_interval)
                    command = self.decoder.decode(key)
                    if command is not None and not apply_command(tracker, command):
                        return "quit"

                    live.update(self.create_layout(tracker))

        except KeyboardInterrupt:
            return "interrupted"
        finally:
            keyboard.stop()


def show_summary(tracker: SessionTracker, console: Console | None = None):
    """Print per-mode totals after the tracker exits."""
    console = console or Console()

    focus = format_duration(tracker.total_elapsed(Mode.FOCUS))
    rest = format_duration(tracker.total_elapsed(Mode.REST))

    panel = Panel(
        f"""[bold cyan]Session Summary[/bold cyan]

Focus: {focus}
Rest:  {rest}""",
        border_style="cyan",
        padding=(1, 2),
    )

    console.print(panel)
