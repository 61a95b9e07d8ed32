import sys

import pypandoc
import pytest
from bs4 import BeautifulSoup

from runner.execution import RunnerConfig, StaticSettingsProvider
from runner.execution.sink import SoupBlockSink, SoupOutputSink


def pandoc_available():
    try:
        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


requires_pandoc = pytest.mark.skipif(not pandoc_available(), reason="pandoc is not installed")


@pytest.fixture(autouse=True)
def celery_eager():
    from PyRunProject import celery_app

    celery_app.conf.task_always_eager = True
    yield
    celery_app.conf.task_always_eager = False


@pytest.fixture
def soup():
    return BeautifulSoup('<div class="python-block"></div>', "html.parser")


@pytest.fixture
def block_sink(soup):
    return SoupBlockSink(soup, soup.div)


@pytest.fixture
def output_sink(soup):
    pre = soup.new_tag("pre", attrs={"class": "python-output"})
    soup.div.append(pre)
    return SoupOutputSink(soup, pre)


@pytest.fixture
def make_settings():
    """Build a settings provider running the current interpreter."""

    def _make(**overrides):
        values = {"interpreter_path": sys.executable}
        values.update(overrides)
        return StaticSettingsProvider(RunnerConfig(**values))

    return _make
