"""Operating system families the launcher knows how to target."""

from enum import Enum


class OsFamily(Enum):
    """Supported OS families."""

    POSIX = "posix"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.name
