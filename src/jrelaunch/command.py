"""Build the runtime invocation command for an OS family."""

import logging

from jrelaunch.errors import UnsupportedPlatformError
from jrelaunch.models import CommandLine, LauncherConfig, LaunchSpec, OsFamily

log = logging.getLogger(__name__)

# (path separator, runtime executable name) per family.
_LAYOUT = {
    OsFamily.POSIX: ("/", "java"),
    OsFamily.WINDOWS: ("\\", "java.exe"),
}


def path_separator(os_family: OsFamily) -> str:
    """Return the path separator used in commands for `os_family`."""
    try:
        return _LAYOUT[os_family][0]
    except KeyError:
        raise UnsupportedPlatformError(f"No command layout for OS family {os_family!r}") from None


def _quote(value: str) -> str:
    return f'"{value}"'


def _native_dir(label: str, value: str, sep: str) -> str:
    """Return `value` with both separator styles rewritten to `sep`."""
    if '"' in value:
        raise ValueError(f"{label} must not contain a double quote, got {value!r}")
    value = value.replace("/", sep).replace("\\", sep).rstrip(sep)
    if not value.strip():
        raise ValueError(f"{label} must not be empty")
    return value


def build_spec(os_family: OsFamily, runtime_dir: str, lib_dir: str, entry_point: str) -> LaunchSpec:
    """Return the executable path, classpath and entry point for `os_family`."""
    sep = path_separator(os_family)
    exe = _LAYOUT[os_family][1]
    runtime_dir = _native_dir("runtime_dir", runtime_dir, sep)
    lib_dir = _native_dir("lib_dir", lib_dir, sep)
    if not entry_point or not entry_point.strip():
        raise ValueError("entry_point must not be empty")
    if any(ch.isspace() for ch in entry_point):
        raise ValueError(f"entry_point must be a single token, got {entry_point!r}")

    return LaunchSpec(
        runtime_executable_path=sep.join([".", runtime_dir, "bin", exe]),
        classpath_argument=f"{lib_dir}{sep}*",
        entry_point=entry_point,
    )


def build_command(
    os_family: OsFamily, runtime_dir: str, lib_dir: str, entry_point: str
) -> CommandLine:
    """Assemble `"<exe>" -cp "<lib>/*" <entry point>` for `os_family`.

    The executable path and the classpath are always quoted so that spaces
    survive argument splitting and the `*` is never expanded by a shell.
    """
    spec = build_spec(os_family, runtime_dir, lib_dir, entry_point)
    text = " ".join(
        [
            _quote(spec.runtime_executable_path),
            "-cp",
            _quote(spec.classpath_argument),
            spec.entry_point,
        ]
    )
    log.debug("built command for %s: %s", os_family, text)
    return CommandLine(spec=spec, text=text)


def build_from_config(os_family: OsFamily, config: LauncherConfig) -> CommandLine:
    """Build the command for `os_family` from a launcher config."""
    return build_command(os_family, config.runtime_dir, config.lib_dir, config.main_class)
