"""Platform launchers that start the runtime as a detached child process."""

from jrelaunch.errors import UnsupportedPlatformError
from jrelaunch.launcher.base import ProcessLauncher
from jrelaunch.launcher.posix import PosixLauncher
from jrelaunch.launcher.windows import WindowsLauncher
from jrelaunch.models import CommandLine, LaunchResult, OsFamily

__all__ = [
    "PosixLauncher",
    "ProcessLauncher",
    "WindowsLauncher",
    "get_launcher",
    "launch",
]

_LAUNCHERS: dict[OsFamily, type[ProcessLauncher]] = {
    OsFamily.POSIX: PosixLauncher,
    OsFamily.WINDOWS: WindowsLauncher,
}


def get_launcher(os_family: OsFamily) -> ProcessLauncher:
    """Return a launcher for `os_family`."""
    try:
        launcher_cls = _LAUNCHERS[os_family]
    except KeyError:
        raise UnsupportedPlatformError(f"No launcher for OS family {os_family!r}") from None
    return launcher_cls()


def launch(command_line: CommandLine | str, os_family: OsFamily) -> LaunchResult:
    """Start `command_line` with the launcher for `os_family`."""
    return get_launcher(os_family).launch(command_line)
