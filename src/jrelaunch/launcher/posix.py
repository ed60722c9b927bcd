"""POSIX launcher: hand the command line to the shell and wait."""

import subprocess

from jrelaunch.launcher.base import ProcessLauncher
from jrelaunch.models import FailureKind, LaunchResult, OsFamily


class PosixLauncher(ProcessLauncher):
    """Runs the command through `/bin/sh`, like C `system()`.

    No console window is expected on POSIX targets, so nothing is done to
    hide one. This is an assumption for desktop environments that wrap
    shells in terminal windows.
    """

    os_family = OsFamily.POSIX

    def _start(self, command: str) -> LaunchResult:
        try:
            completed = subprocess.run(command, shell=True, check=False)
        except (OSError, ValueError) as e:
            return LaunchResult.failed(
                FailureKind.OS_ERROR,
                f"Could not run shell command: {e}",
                getattr(e, "errno", None),
            )
        if completed.returncode == 0:
            return LaunchResult.started()
        return LaunchResult.failed(
            FailureKind.EXIT_STATUS,
            f"Command exited with status {completed.returncode}",
            completed.returncode,
        )
