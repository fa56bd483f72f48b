"""Keystroke to tracker command decoding."""

from enum import Enum

from .state import Mode, SessionTracker


class TrackerCommand(str, Enum):
    ENTER_FOCUS = "enter_focus"
    ENTER_REST = "enter_rest"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"


class CommandDecoder:
    """Turns single keystrokes into tracker commands.

    Quitting requires typing the whole quit word, so the decoder keeps a
    rolling buffer of the most recent characters. The quit word is checked
    before the single-key bindings.
    """

    def __init__(
        self,
        focus_key: str = "f",
        rest_key: str = "r",
        pause_key: str = "p",
        quit_word: str = "quit",
    ):
        self.bindings = {
            focus_key.lower(): TrackerCommand.ENTER_FOCUS,
            rest_key.lower(): TrackerCommand.ENTER_REST,
            pause_key.lower(): TrackerCommand.TOGGLE_PAUSE,
        }
        self.quit_word = quit_word.lower()
        self.typed = ""

    def decode(self, key: str | None) -> TrackerCommand | None:
        """Return the command for *key*, or None if it maps to nothing."""
        if not key:
            return None

        key = key.lower()
        self.typed = (self.typed + key)[-len(self.quit_word) :]
        if self.typed == self.quit_word:
            self.typed = ""
            return TrackerCommand.QUIT

        return self.bindings.get(key)


def apply_command(tracker: SessionTracker, command: TrackerCommand) -> bool:
    """Run *command* against *tracker*.

    Returns False when the control loop should stop.
    """
    if command is TrackerCommand.QUIT:
        return False
    if command is TrackerCommand.ENTER_FOCUS:
        tracker.change_mode(Mode.FOCUS)
    elif command is TrackerCommand.ENTER_REST:
        tracker.change_mode(Mode.REST)
    elif command is TrackerCommand.TOGGLE_PAUSE:
        tracker.toggle_pause()
    return True
