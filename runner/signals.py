"""
Signal handlers for the runner app.

Rendered note HTML embeds the output of executed blocks, which depends on the
runner settings. When the settings change, notes are re-rendered.
"""

import logging

from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from runner.models import RunnerSettings
from runner.tasks import render_all_notes

logger = logging.getLogger(__name__)


@receiver(post_save, sender=RunnerSettings)
def rerender_notes_on_settings_change(sender, instance, created, **kwargs):
    """
    Schedule a re-render of all notes after the runner settings were saved.

    Controlled by settings.RUNNER_RERENDER_ON_SETTINGS_CHANGE (default: True).
    """
    logger.info(
        f"Runner settings saved: interpreter='{instance.interpreter_path}', "
        f"show_source={instance.show_source_in_preview}, "
        f"show_exit_status={instance.show_exit_status}"
    )

    if created:
        logger.debug("Runner settings created with defaults, nothing to re-render")
        return

    if not getattr(settings, "RUNNER_RERENDER_ON_SETTINGS_CHANGE", True):
        return

    transaction.on_commit(lambda: render_all_notes.delay())
