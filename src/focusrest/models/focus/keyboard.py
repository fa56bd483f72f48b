"""Terminal keyboard input for the tracker controls."""

import os
import select
import sys
import termios
import tty
from typing import Optional


class KeyboardHandler:
    """Cbreak-mode keyboard reader with a bounded wait.

    Bytes are read straight from the file descriptor, one per call, so
    ``select`` and the reader agree on what is still pending. Reading through
    ``sys.stdin`` would buffer several keys at once and hide them from
    ``select``.
    """

    def __init__(self, fd: Optional[int] = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode, remembering the old settings."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error:
            # Not a TTY
            pass

    def get_key(self, timeout: float = 0) -> Optional[str]:
        """
        Wait up to *timeout* seconds for a keypress.

        Returns the lowercased key character or None if nothing was typed.
        Multi-byte sequences (arrow keys) arrive one byte per call.
        """
        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(self.fd, 1)
        except (OSError, ValueError):
            return None
        key = data.decode(errors="ignore")
        return key.lower() if key else None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
