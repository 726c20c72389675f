"""Help screen, version lookup and privilege check."""

from __future__ import annotations

import os
import platform
import subprocess
from datetime import datetime

from catman.mirrors import VERSION_URL
from catman.net import FetchError, fetch_version

LOCAL_VERSION = "0.0.1 beta"
VERSION_TIMEOUT = 5.0

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_USAGE = (
    "Usage:",
    "  -h, --help            Show this help",
    "  -i, --install NAME    Install package",
    "  -s, --search NAME     Search package",
    "  -l, --list            List installed packages",
    "  -d, --delete NAME     Delete package",
)


def is_root() -> bool:
    """Tell whether the process runs with an effective user id of 0."""
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def kernel_version() -> str:
    """Return the running kernel release, or ``unknown`` if it cannot be found."""
    try:
        result = subprocess.run(
            ["uname", "-r"], capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return result.stdout.strip()


def get_version(url: str = VERSION_URL) -> str:
    """Return the published version, falling back to the local one."""
    try:
        remote = fetch_version(url, VERSION_TIMEOUT).strip()
    except FetchError:
        return LOCAL_VERSION
    return remote or LOCAL_VERSION


def _format_timestamp(moment: datetime) -> str:
    offset = moment.strftime("%z") or "+0000"
    return (
        f"{_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
        f"{moment.year:04d} {moment:%H:%M:%S} {offset}"
    )


def usage_text(version: str, kernel: str, now: datetime) -> str:
    """Build the help screen for the given version, kernel and time."""
    lines = [
        f"catman version {version} ({_format_timestamp(now)})",
        f"kernel version: {kernel}",
        f"python version: {platform.python_version()}",
        "",
        *_USAGE,
    ]
    return "\n".join(lines) + "\n"


def print_help() -> None:
    """Print the help screen."""
    print(
        usage_text(get_version(), kernel_version(), datetime.now().astimezone()),
        end="",
    )