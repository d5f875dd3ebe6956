"""Interactive terminal detection."""

import sys


def is_tty() -> bool:
    """Return True when stdin is attached to an interactive terminal."""
    stream = sys.stdin
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (OSError, ValueError):
        # Closed or detached stream
        return False
