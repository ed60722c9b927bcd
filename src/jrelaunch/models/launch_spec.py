"""Launch command models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchSpec:
    """The three pieces of a runtime invocation, with OS-native separators."""

    runtime_executable_path: str
    classpath_argument: str
    entry_point: str


@dataclass(frozen=True)
class CommandLine:
    """A fully assembled, quoted invocation string and the spec it came from."""

    spec: LaunchSpec
    text: str

    def __str__(self) -> str:
        return self.text
