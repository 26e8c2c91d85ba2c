"""Console logging with colour prefixes, thread names and channel markers."""

from __future__ import annotations

import enum
import sys
import threading
import time
from dataclasses import dataclass

__all__ = [
    "LogOptions",
    "LogSettings",
    "Channel",
    "settings",
    "strip_colors",
    "simple_debug_out",
    "get_thread_name",
    "set_thread_name",
    "format_line",
    "log",
    "note",
    "warn",
    "RESET",
    "BLACK",
    "COAL",
    "GRAY",
    "WHITE",
    "MAROON",
    "RED",
    "GREEN",
    "LIME",
    "ORANGE",
    "YELLOW",
    "NAVY",
    "BLUE",
    "VIOLET",
    "PURPLE",
    "TEAL",
    "CYAN",
]

RESET = "\x1b[0m"

# Regular colours
BLACK = "\x1b[30m"
COAL = "\x1b[90m"
GRAY = "\x1b[37m"
WHITE = "\x1b[97m"
MAROON = "\x1b[31m"
RED = "\x1b[91m"
GREEN = "\x1b[32m"
LIME = "\x1b[92m"
ORANGE = "\x1b[33m"
YELLOW = "\x1b[93m"
NAVY = "\x1b[34m"
BLUE = "\x1b[94m"
VIOLET = "\x1b[35m"
PURPLE = "\x1b[95m"
TEAL = "\x1b[36m"
CYAN = "\x1b[96m"

# Bold
BLACK_BOLD = "\x1b[1;30m"
COAL_BOLD = "\x1b[1;90m"
GRAY_BOLD = "\x1b[1;37m"
WHITE_BOLD = "\x1b[1;97m"
MAROON_BOLD = "\x1b[1;31m"
RED_BOLD = "\x1b[1;91m"
GREEN_BOLD = "\x1b[1;32m"
LIME_BOLD = "\x1b[1;92m"
ORANGE_BOLD = "\x1b[1;33m"
YELLOW_BOLD = "\x1b[1;93m"
NAVY_BOLD = "\x1b[1;34m"
BLUE_BOLD = "\x1b[1;94m"
VIOLET_BOLD = "\x1b[1;35m"
PURPLE_BOLD = "\x1b[1;95m"
TEAL_BOLD = "\x1b[1;36m"
CYAN_BOLD = "\x1b[1;96m"

# Background
ON_BLACK = "\x1b[40m"
ON_COAL = "\x1b[100m"
ON_GRAY = "\x1b[47m"
ON_WHITE = "\x1b[107m"
ON_MAROON = "\x1b[41m"
ON_RED = "\x1b[101m"
ON_GREEN = "\x1b[42m"
ON_LIME = "\x1b[102m"
ON_ORANGE = "\x1b[43m"
ON_YELLOW = "\x1b[103m"
ON_NAVY = "\x1b[44m"
ON_BLUE = "\x1b[104m"
ON_VIOLET = "\x1b[45m"
ON_PURPLE = "\x1b[105m"
ON_TEAL = "\x1b[46m"
ON_CYAN = "\x1b[106m"

# Underline
BLACK_UNDER = "\x1b[4;30m"
GRAY_UNDER = "\x1b[4;37m"
MAROON_UNDER = "\x1b[4;31m"
GREEN_UNDER = "\x1b[4;32m"
ORANGE_UNDER = "\x1b[4;33m"
NAVY_UNDER = "\x1b[4;34m"
VIOLET_UNDER = "\x1b[4;35m"
TEAL_UNDER = "\x1b[4;36m"


class LogOptions(enum.IntFlag):
    """Optional kinds of extra log output."""

    NONE = 0
    JSON = 1
    PER_GPU = 2
    NEXT = 4
    PROGRAMFLOW = 256


@dataclass
class LogSettings:
    """Process-wide logging switches."""

    options: LogOptions = LogOptions.NONE
    no_color: bool = False
    syslog: bool = False
    stdout: bool = False


settings = LogSettings()


class Channel(enum.Enum):
    """Standard log channels; each value is the coloured line marker."""

    LOG = GRAY + ".."
    WARN = RED + " X"
    NOTE = BLUE + " i"


def strip_colors(text: str) -> str:
    """Remove escape sequences, from ESC up to and including the next 'm'."""
    out = []
    skip = False
    for char in text:
        if not skip and char == "\x1b":
            skip = True
        elif skip and char == "m":
            skip = False
        elif not skip:
            out.append(char)
    return "".join(out)


def simple_debug_out(text: str) -> None:
    """Write one log line to stderr (or stdout if configured); never raises."""
    try:
        stream = sys.stdout if settings.stdout else sys.stderr
        line = text if not settings.no_color else strip_colors(text)
        stream.write(line + "\n")
        stream.flush()
    except Exception:  # logging must never bring the caller down
        return


def get_thread_name() -> str:
    """Return the name of the calling thread."""
    return threading.current_thread().name


def set_thread_name(name: str) -> None:
    """Rename the calling thread."""
    threading.current_thread().name = name


def format_line(channel: Channel | str, message: str) -> str:
    """Build a complete log line with marker, time and thread name."""
    marker = channel.value if isinstance(channel, Channel) else channel
    thread_name = get_thread_name()
    if settings.syslog:
        return f"{thread_name:<8} {RESET}{message}"
    stamp = time.strftime("%X", time.localtime())
    return f"{marker} {VIOLET}{stamp} {BLUE}{thread_name:<9} {RESET}{message}"


def log(channel: Channel | str, message: str) -> None:
    """Emit ``message`` on ``channel``."""
    simple_debug_out(format_line(channel, message))


def note(message: str) -> None:
    """Emit an informational message."""
    log(Channel.NOTE, message)


def warn(message: str) -> None:
    """Emit a warning message."""
    log(Channel.WARN, message)