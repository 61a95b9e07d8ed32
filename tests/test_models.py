import pytest

from runner.execution import DatabaseSettingsProvider, RunnerConfig
from runner.models import Note, RunnerSettings
from runner.tasks import render_note_html


@pytest.mark.django_db
class TestRunnerSettings:
    def test_load_creates_defaults(self):
        assert not RunnerSettings.objects.exists()

        settings = RunnerSettings.load()

        assert settings.to_config() == RunnerConfig(
            interpreter_path="python",
            show_source_in_preview=True,
            show_exit_status=False,
        )

    def test_save_then_reload_round_trip(self):
        settings = RunnerSettings.load()
        settings.update_from_config(
            RunnerConfig(
                interpreter_path="/opt/python3.12/bin/python3",
                show_source_in_preview=False,
                show_exit_status=True,
            )
        )
        settings.save()

        reloaded = RunnerSettings.load()
        assert reloaded.interpreter_path == "/opt/python3.12/bin/python3"
        assert reloaded.show_source_in_preview is False
        assert reloaded.show_exit_status is True

    def test_only_one_row_is_ever_stored(self):
        RunnerSettings.load()
        RunnerSettings(interpreter_path="python3").save()
        RunnerSettings.load().save()

        assert RunnerSettings.objects.count() == 1
        assert RunnerSettings.load().interpreter_path == "python3"

    def test_saving_a_new_instance_keeps_creation_time(self):
        created_at = RunnerSettings.load().created_at

        RunnerSettings(interpreter_path="python3", show_exit_status=True).save()

        stored = RunnerSettings.objects.get()
        assert stored.created_at == created_at
        assert stored.show_exit_status is True

    def test_delete_keeps_the_row(self):
        RunnerSettings.load().delete()

        assert RunnerSettings.objects.count() == 1

    def test_database_provider_reads_current_values(self):
        provider = DatabaseSettingsProvider()
        assert provider.get_config().show_exit_status is False

        settings = RunnerSettings.load()
        settings.show_exit_status = True
        settings.save()

        assert provider.get_config().show_exit_status is True


@pytest.mark.django_db
class TestNote:
    def test_slug_derived_and_unique(self):
        first = Note.objects.create(title="Hello World")
        second = Note.objects.create(title="Hello World")

        assert first.slug == "hello-world"
        assert second.slug == "hello-world-2"

    def test_render_scheduled_only_when_markdown_changes(self, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks() as callbacks:
            note = Note.objects.create(title="Runs", content_markdown="text")
        assert len(callbacks) == 1

        with django_capture_on_commit_callbacks() as callbacks:
            note.title = "Renamed"
            note.save()
        assert len(callbacks) == 0

        with django_capture_on_commit_callbacks() as callbacks:
            note.content_markdown = "changed"
            note.save()
        assert len(callbacks) == 1


@pytest.mark.django_db
def test_render_task_reports_missing_note():
    result = render_note_html(999999)

    assert result == {"success": False, "error": "Note 999999 not found"}
