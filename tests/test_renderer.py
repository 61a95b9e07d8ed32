import sys

import pytest
from bs4 import BeautifulSoup

from runner.markdown.renderer import render_markdown
from runner.models import Note, RunnerSettings
from runner.tasks import render_note_html
from tests.conftest import requires_pandoc

MARKDOWN = """# Demo

Some *text*.

```python
# run
print("hello")
```

```python
print("never runs")
# run
```

```bash
# run
echo nope
```
"""


@requires_pandoc
class TestRenderMarkdown:
    def test_marked_python_block_output_is_embedded(self, make_settings):
        html = render_markdown(
            MARKDOWN, context={"settings_provider": make_settings(), "highlighter": None}
        )
        soup = BeautifulSoup(html, "html.parser")

        assert soup.find("h1").get_text() == "Demo"
        outputs = soup.find_all("pre", class_="python-output")
        assert len(outputs) == 1
        assert outputs[0].get_text().strip() == "hello"
        assert len(soup.find_all("div", class_="python-block")) == 2

    def test_other_languages_rendered_by_pandoc(self, make_settings):
        html = render_markdown(
            MARKDOWN, context={"settings_provider": make_settings(), "highlighter": None}
        )

        assert "echo nope" in BeautifulSoup(html, "html.parser").get_text()

    def test_raw_html_in_markdown_is_escaped(self, make_settings):
        html = render_markdown(
            "<script>alert(1)</script>\n",
            context={"settings_provider": make_settings(), "highlighter": None},
        )

        assert "<script>" not in html

    def test_raw_placeholder_div_does_not_run_a_block_twice(self, make_settings, tmp_path):
        target = tmp_path / "runs.txt"
        markdown = (
            "```python\n"
            "# run\n"
            f"open({str(target)!r}, 'a').write('x')\n"
            "```\n"
            "\n"
            '<div id="runner-block-0" class="runner-block"></div>\n'
        )

        render_markdown(
            markdown, context={"settings_provider": make_settings(), "highlighter": None}
        )

        assert target.read_text() == "x"


@requires_pandoc
@pytest.mark.django_db
def test_render_task_stores_html():
    runner_settings = RunnerSettings.load()
    runner_settings.interpreter_path = sys.executable
    runner_settings.save()
    note = Note.objects.create(title="Task", content_markdown="```python\n# run\nprint(6 * 7)\n```\n")

    result = render_note_html(note.pk)

    note.refresh_from_db()
    assert result == {"success": True, "note_id": note.pk, "slug": "task"}
    assert note.rendered_at is not None
    output = BeautifulSoup(note.content_html, "html.parser").find("pre", class_="python-output")
    assert output.get_text().strip() == "42"


@requires_pandoc
@pytest.mark.django_db
def test_markdown_template_filter_uses_stored_settings():
    from django.template import Context, Template

    runner_settings = RunnerSettings.load()
    runner_settings.interpreter_path = sys.executable
    runner_settings.show_source_in_preview = False
    runner_settings.save()

    template = Template("{% load markdown_tags %}{{ text|markdown }}")
    html = template.render(Context({"text": "```python\n# run\nprint('filtered')\n```\n"}))

    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("code", class_="language-python") is None
    assert soup.find("pre", class_="python-output").get_text().strip() == "filtered"
