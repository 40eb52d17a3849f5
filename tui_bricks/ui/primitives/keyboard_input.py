"""
Keyboard input handling for TUI Bricks.

Blocking line reads and single-keypress reads. Terminal modes changed for
a keypress are always restored, including when the read fails.
"""

import sys
import os
from contextlib import contextmanager

# Platform-specific imports
if os.name == 'nt':
    import msvcrt
else:
    import fcntl
    import termios
    import tty
    import select


KEY_ESC = "\x1b"


class CancelInput(Exception):
    """Raised when user cancels a prompt with ESC."""
    pass


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def raw_terminal(stream=None):
    """Context manager for raw terminal mode (Unix tty only, no-op otherwise)."""
    stream = stream if stream is not None else sys.stdin
    if os.name == 'nt' or not _is_tty(stream):
        yield None
    else:
        fd = stream.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


@contextmanager
def cbreak_noecho(stream=None):
    """Context manager for cbreak mode with echo disabled (Unix tty only, no-op otherwise).

    Unlike raw mode, this keeps signal keys working (Ctrl-C still raises
    KeyboardInterrupt) while disabling input echo and line buffering.
    """
    stream = stream if stream is not None else sys.stdin
    if os.name == 'nt' or not _is_tty(stream):
        yield None
    else:
        fd = stream.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            new_settings = termios.tcgetattr(fd)
            # Disable echo and canonical mode (line buffering)
            new_settings[3] = new_settings[3] & ~(termios.ECHO | termios.ICANON)
            new_settings[6][termios.VMIN] = 1
            new_settings[6][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSANOW, new_settings)
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def _read_ready_char(stream, fd) -> str:
    """Read one character if it is already waiting, else ''."""
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        try:
            return stream.read(1) or ''
        except (IOError, BlockingIOError):
            return ''
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


def read_escape_sequence(stream, fd) -> str:
    """
    Read the rest of an escape sequence after ESC was seen.

    Only the sequence itself is consumed: for CSI ("ESC [") that is the
    parameter bytes up to the first final byte in '@'..'~', for SS3
    ("ESC O") one more character. Keys typed after it stay in the stream.

    Returns the extra characters (not including the initial ESC), one
    plain character for Alt+key, or '' when ESC was pressed on its own.
    """
    if fd is None:
        return ''

    # Sequence bytes arrive together with the ESC; a short wait is enough
    select.select([stream], [], [], 0.005)
    first = _read_ready_char(stream, fd)

    if first == '[':
        sequence = first
        while True:
            ch = _read_ready_char(stream, fd)
            if not ch:
                break
            sequence += ch
            if '@' <= ch <= '~':
                break
        return sequence

    if first == 'O':
        return first + _read_ready_char(stream, fd)

    return first


class KeyboardInput:
    """Blocking reads from an input stream (stdin by default)."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self) -> str:
        """
        Read one newline-terminated line.

        Raises:
            EOFError: If the stream is exhausted
        """
        line = self.stream.readline()
        if not line:
            raise EOFError("input stream closed")
        return line

    def read_key(self) -> str:
        """
        Read a single keypress without waiting for Enter.

        Returns the character, KEY_ESC for a standalone ESC, or '' for keys
        that do not produce a character (arrows, function keys).

        Raises:
            EOFError: If the stream is exhausted
        """
        if os.name == 'nt' and self.stream is sys.stdin:
            return self._read_key_windows()

        with cbreak_noecho(self.stream) as fd:
            ch = self.stream.read(1)
            if not ch:
                raise EOFError("input stream closed")
            if ch == KEY_ESC and fd is not None:
                extra = read_escape_sequence(self.stream, fd)
                if extra[:1] in ('[', 'O'):
                    return ''
                if extra:
                    # Alt+key arrives as ESC followed by the key
                    return extra
            return ch

    def _read_key_windows(self) -> str:
        ch = msvcrt.getch()

        # Arrow/function keys send two bytes: 0xe0 or 0x00 then the key code
        if ch in (b'\xe0', b'\x00'):
            msvcrt.getch()
            return ''

        if ch == b'\x1b':
            if msvcrt.kbhit():
                while msvcrt.kbhit():
                    msvcrt.getch()
                return ''
            return KEY_ESC

        return ch.decode('utf-8', errors='ignore')


_keyboard = None


def get_keyboard() -> KeyboardInput:
    """Get the shared stdin keyboard, creating it on first use."""
    global _keyboard
    if _keyboard is None:
        _keyboard = KeyboardInput()
    return _keyboard
