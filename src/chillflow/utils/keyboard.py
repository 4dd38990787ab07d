"""Non-blocking single-key input for the interactive timer."""

import select
import sys


class KeyboardHandler:
    """Reads single keypresses from a terminal without blocking.

    Falls back to reporting no keys when stdin is not a TTY.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.old_settings = None
        self._setup()

    def _setup(self) -> None:
        """Put the terminal in cbreak mode."""
        try:
            import termios
            import tty

            fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except (ImportError, OSError, ValueError, AttributeError):
            # Not a terminal (pipes, tests) or no termios on this platform
            self.old_settings = None

    @property
    def interactive(self) -> bool:
        return self.old_settings is not None

    def get_key(self) -> str | None:
        """Return the lower-cased key pressed, or None if nothing is waiting."""
        if not self.interactive:
            return None
        ready, _, _ = select.select([self.stream], [], [], 0)
        if ready:
            return self.stream.read(1).lower()
        return None

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is None:
            return
        import termios

        termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self.old_settings)
        self.old_settings = None

    def __enter__(self) -> "KeyboardHandler":
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
