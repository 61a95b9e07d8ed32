"""
Runner configuration and the providers that hand it to block processing.

The configuration is a flat, three-field object. It is read on every block
render, so providers must return the current values rather than a snapshot
taken at import time.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional, Protocol

DEFAULT_INTERPRETER_PATH = "python"


@dataclass(frozen=True)
class RunnerConfig:
    interpreter_path: str = DEFAULT_INTERPRETER_PATH
    show_source_in_preview: bool = True
    show_exit_status: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RunnerConfig":
        """
        Merge a stored key/value mapping over the defaults.

        Unknown keys are ignored and missing keys keep their default, so a
        partially saved settings object still loads.
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in (data or {}).items() if k in known}
        return cls(**values)

    def to_mapping(self) -> dict:
        return asdict(self)


class SettingsProvider(Protocol):
    def get_config(self) -> RunnerConfig: ...


class StaticSettingsProvider:
    """Provider returning a fixed configuration."""

    def __init__(self, config: Optional[RunnerConfig] = None):
        self.config = config or RunnerConfig()

    def get_config(self) -> RunnerConfig:
        return self.config


class DatabaseSettingsProvider:
    """Provider backed by the RunnerSettings singleton row."""

    def get_config(self) -> RunnerConfig:
        # Lazy import to avoid circular import
        from runner.models import RunnerSettings

        return RunnerSettings.load().to_config()
