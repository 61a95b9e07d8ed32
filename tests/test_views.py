from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from runner.models import Note, RunnerSettings


@pytest.mark.django_db
class TestNoteViews:
    def test_detail_shows_rendered_html(self, client):
        note = Note.objects.create(title="Shown", content_markdown="```python\n# run\n```")
        Note.objects.filter(pk=note.pk).update(
            content_html='<pre class="python-output"><code>hello</code></pre>',
            rendered_at=timezone.now(),
        )

        response = client.get(note.get_absolute_url())

        assert response.status_code == 200
        assert b'<pre class="python-output"><code>hello</code></pre>' in response.content

    def test_detail_before_render_shows_markdown(self, client):
        note = Note.objects.create(title="Pending", content_markdown="plain words")

        response = client.get(note.get_absolute_url())

        assert b"<pre>plain words</pre>" in response.content

    def test_list(self, client):
        Note.objects.create(title="Listed")

        response = client.get("/")

        assert b"Listed" in response.content


@pytest.mark.django_db
class TestSettingsPanel:
    def test_changelist_redirects_to_the_single_row(self, admin_client):
        response = admin_client.get("/admin/runner/runnersettings/")

        assert response.status_code == 302
        assert response["Location"] == "/admin/runner/runnersettings/1/change/"

    def test_saving_the_form_persists(self, admin_client):
        RunnerSettings.load()

        response = admin_client.post(
            "/admin/runner/runnersettings/1/change/",
            {"interpreter_path": "python3", "show_exit_status": "on"},
        )

        assert response.status_code == 302
        settings = RunnerSettings.load()
        assert settings.interpreter_path == "python3"
        assert settings.show_source_in_preview is False
        assert settings.show_exit_status is True


@pytest.mark.django_db
class TestRenderNotesCommand:
    def test_dry_run_counts_blocks_without_executing(self):
        Note.objects.create(
            title="Counted",
            content_markdown="```python\n# run\nprint(1)\n```\n\n```python\nx = 1\n```\n",
        )
        out = StringIO()

        call_command("render_notes", "--dry-run", stdout=out)

        output = out.getvalue()
        assert "Counted (counted): 2 python block(s), 1 to run" in output
        assert "DRY RUN COMPLETE" in output
        assert Note.objects.get(slug="counted").rendered_at is None

    def test_unknown_slug(self):
        out = StringIO()

        call_command("render_notes", "--note-slug", "missing", stdout=out)

        assert "No note found with slug: missing" in out.getvalue()

    def test_render_reports_failures(self, monkeypatch):
        import runner.markdown.renderer as renderer

        def broken(text, context=None):
            raise OSError("pandoc missing")

        monkeypatch.setattr(renderer, "render_markdown", broken)
        RunnerSettings.load()
        Note.objects.create(title="Broken", content_markdown="text")
        out = StringIO()

        call_command("render_notes", stdout=out)

        assert "Error rendering note broken: pandoc missing" in out.getvalue()
        assert "Notes failed:" in out.getvalue()
