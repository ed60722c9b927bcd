"""Console report helpers."""

import os
import sys

from jrelaunch.command import path_separator
from jrelaunch.models import LauncherConfig, LaunchResult, OsFamily

BOLD = "\033[1m"
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


def supports_color() -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return sys.stdout.isatty()


def _paint(text: str, color: str) -> str:
    if supports_color():
        return f"{BOLD}{color}{text}{RESET}"
    return text


def failure_checklist(config: LauncherConfig, os_family: OsFamily) -> list[str]:
    """Return the numbered list of likely causes for a failed launch."""
    sep = path_separator(os_family)
    runtime_bin = sep.join([".", config.runtime_dir, "bin"]) + sep
    lib_dir = sep.join([".", config.lib_dir]) + sep
    return [
        f"1. The JRE path is correct and contains the java executable (expected {runtime_bin})",
        f"2. The lib directory exists and holds the required JAR files (expected {lib_dir})",
        f"3. The main class name '{config.main_class}' is correct",
        f"4. The JRE matches this operating system ({os_family}) and CPU architecture",
        "5. File permissions allow running the JRE and reading the libraries",
        "6. The Java process itself reported no errors (its output is not captured)",
        "7. The command above was parsed as intended",
    ]


def format_result(result: LaunchResult, config: LauncherConfig, os_family: OsFamily) -> list[str]:
    """Return the report lines for a launch outcome."""
    if result:
        return [
            _paint("The command started. The Java application should now be running.", GREEN),
            "(This does not guarantee the application initialised without errors.)",
        ]
    error = result.error
    headline = "The command failed to start"
    if error is not None:
        headline += f": {error.message}"
    return [_paint(headline, RED), "Please check:", *failure_checklist(config, os_family)]
