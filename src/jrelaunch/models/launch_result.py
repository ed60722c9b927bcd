"""Launch outcome models."""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Why a launch did not start."""

    EXIT_STATUS = "exit_status"
    CREATE_PROCESS = "create_process"
    OS_ERROR = "os_error"


@dataclass(frozen=True)
class LaunchError:
    kind: FailureKind
    message: str
    code: int | None = None


@dataclass(frozen=True)
class LaunchResult:
    """Whether the child process started, plus error details when it did not."""

    success: bool
    error: LaunchError | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def started(cls) -> "LaunchResult":
        return cls(success=True)

    @classmethod
    def failed(cls, kind: FailureKind, message: str, code: int | None = None) -> "LaunchResult":
        return cls(success=False, error=LaunchError(kind=kind, message=message, code=code))
