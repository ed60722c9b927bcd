"""Common launcher interface."""

import logging
from abc import ABC, abstractmethod

from jrelaunch.models import CommandLine, LaunchResult, OsFamily

log = logging.getLogger(__name__)


class ProcessLauncher(ABC):
    """Starts a windowless child process from a command line.

    Each call goes NotStarted -> Starting -> Started or Failed. Failures are
    returned as a `LaunchResult`; nothing is retried.
    """

    os_family: OsFamily

    def launch(self, command_line: CommandLine | str) -> LaunchResult:
        command = str(command_line)
        log.debug("%s launching: %s", type(self).__name__, command)
        result = self._start(command)
        if result:
            log.debug("launch started")
        else:
            log.debug("launch failed: %s", result.error)
        return result

    @abstractmethod
    def _start(self, command: str) -> LaunchResult:
        """Run the platform primitive for `command`."""
