from django.apps import AppConfig


class RunnerAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'runner'

    def ready(self):
        """Import signal handlers when app is ready."""
        import runner.signals  # noqa: F401 - Register settings signal handlers
