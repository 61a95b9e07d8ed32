from .base import SingletonModel, TimeStampedModel
from .note import Note
from .settings import RunnerSettings

__all__ = ["SingletonModel", "TimeStampedModel", "Note", "RunnerSettings"]
