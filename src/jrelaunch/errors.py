"""Exception types for jrelaunch."""


class LauncherError(Exception):
    """Base class for errors the CLI reports and recovers from."""


class UnsupportedPlatformError(LauncherError):
    """Raised when the running OS family has no launch strategy."""


class ConfigError(LauncherError):
    """Raised when a config file or value cannot be used."""
