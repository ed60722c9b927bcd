"""Model package for jrelaunch."""

from jrelaunch.models.launch_result import FailureKind, LaunchError, LaunchResult
from jrelaunch.models.launch_spec import CommandLine, LaunchSpec
from jrelaunch.models.launcher_config import (
    DEFAULT_LIB_DIR,
    DEFAULT_MAIN_CLASS,
    DEFAULT_RUNTIME_DIR,
    LauncherConfig,
)
from jrelaunch.models.os_family import OsFamily

__all__ = [
    "CommandLine",
    "DEFAULT_LIB_DIR",
    "DEFAULT_MAIN_CLASS",
    "DEFAULT_RUNTIME_DIR",
    "FailureKind",
    "LaunchError",
    "LaunchResult",
    "LaunchSpec",
    "LauncherConfig",
    "OsFamily",
]
