"""Configuration model for jrelaunch."""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_RUNTIME_DIR = "jre"
DEFAULT_LIB_DIR = "lib"
DEFAULT_MAIN_CLASS = "com.telecwin.subgrade_radar_analysis.Main"


class LauncherConfig(BaseModel):
    """Where the bundled runtime and libraries live, and what to run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    runtime_dir: str = DEFAULT_RUNTIME_DIR
    lib_dir: str = DEFAULT_LIB_DIR
    main_class: str = DEFAULT_MAIN_CLASS

    @field_validator("runtime_dir", "lib_dir", "main_class")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("runtime_dir", "lib_dir")
    @classmethod
    def _no_quotes(cls, value: str) -> str:
        if '"' in value:
            raise ValueError("must not contain a double quote")
        return value

    @field_validator("main_class")
    @classmethod
    def _single_token(cls, value: str) -> str:
        if any(ch.isspace() for ch in value):
            raise ValueError("must not contain whitespace")
        return value
