"""Operating system family detection."""

import logging
import os
import platform

from jrelaunch.errors import UnsupportedPlatformError
from jrelaunch.models import OsFamily

log = logging.getLogger(__name__)

_OS_NAMES = {
    "nt": OsFamily.WINDOWS,
    "posix": OsFamily.POSIX,
}


def detect_os_family(name: str | None = None) -> OsFamily:
    """Return the OS family for `name` (defaults to `os.name`)."""
    if name is None:
        name = os.name
    family = _OS_NAMES.get(name)
    if family is None:
        raise UnsupportedPlatformError(
            f"Unsupported platform '{name}'. Only POSIX and Windows can be launched."
        )
    log.debug("os.name=%s family=%s", name, family)
    return family


def describe_platform() -> str:
    """Return a short description such as 'Linux 6.1.0 (x86_64)'."""
    system = platform.system() or "unknown"
    release = platform.release()
    machine = platform.machine()
    text = f"{system} {release}".strip()
    if machine:
        text += f" ({machine})"
    return text
