"""
Persisted code runner settings, edited from the admin settings panel.
"""

from django.db import models

from runner.execution.config import DEFAULT_INTERPRETER_PATH, RunnerConfig

from .base import SingletonModel, TimeStampedModel


class RunnerSettings(SingletonModel, TimeStampedModel):
    interpreter_path = models.CharField(
        "Python",
        max_length=500,
        default=DEFAULT_INTERPRETER_PATH,
        help_text="The command used to invoke Python on your system. (ex. python or python3)",
    )
    show_source_in_preview = models.BooleanField(
        "Toggle code snippet",
        default=True,
        help_text="Always show or hide Python code in the markdown preview.",
    )
    show_exit_status = models.BooleanField(
        "Show exit code",
        default=False,
        help_text="Toggle whether to show the exit code message after code execution.",
    )

    class Meta:
        verbose_name = "Runner settings"
        verbose_name_plural = "Runner settings"

    def __str__(self) -> str:
        return "Runner settings"

    def to_config(self) -> RunnerConfig:
        return RunnerConfig(
            interpreter_path=self.interpreter_path,
            show_source_in_preview=self.show_source_in_preview,
            show_exit_status=self.show_exit_status,
        )

    def update_from_config(self, config: RunnerConfig) -> None:
        for field, value in config.to_mapping().items():
            setattr(self, field, value)
