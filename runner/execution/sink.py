"""
Document-rendering sinks used by block processing and process runs.

Block processing and the process runner never touch the HTML tree directly.
They go through these small capabilities instead:

- BlockSink: the rendered container of one code block (source view, output area)
- OutputSink: the output area of one executed block (clear, create elements)
- OutputElement: a single element text is appended to

The Soup* classes implement them over a BeautifulSoup tree.
"""

from typing import Optional, Protocol

from bs4 import BeautifulSoup, Tag

OUTPUT_CLASS = "python-output"
ERROR_CLASS = "python-error-output"

# Element kinds an OutputSink can create
TEXT = "text"
ERROR = "error"
PLAIN = "plain"


class OutputElement(Protocol):
    def append(self, text: str) -> None: ...


class OutputSink(Protocol):
    def clear(self) -> None: ...

    def create_element(self, kind: str) -> OutputElement: ...


class BlockSink(Protocol):
    def add_source(self, source: str, language: str, highlighted: Optional[str] = None) -> None: ...

    def add_output_area(self) -> OutputSink: ...


class SoupOutputElement:
    def __init__(self, tag: Tag):
        self.tag = tag

    def append(self, text: str) -> None:
        self.tag.append(text)


class SoupOutputSink:
    """Output area backed by a <pre> tag."""

    def __init__(self, soup: BeautifulSoup, container: Tag):
        self.soup = soup
        self.container = container

    def clear(self) -> None:
        self.container.clear()

    def create_element(self, kind: str) -> SoupOutputElement:
        if kind == TEXT:
            tag = self.soup.new_tag("code")
        elif kind == ERROR:
            tag = self.soup.new_tag("span", attrs={"class": [ERROR_CLASS]})
        elif kind == PLAIN:
            tag = self.soup.new_tag("span")
        else:
            raise ValueError(f"Unknown output element kind: {kind!r}")
        self.container.append(tag)
        return SoupOutputElement(tag)


class SoupBlockSink:
    """Container element of one rendered code block."""

    def __init__(self, soup: BeautifulSoup, container: Tag):
        self.soup = soup
        self.container = container

    def add_source(self, source: str, language: str, highlighted: Optional[str] = None) -> None:
        pre = self.soup.new_tag("pre")
        code = self.soup.new_tag("code", attrs={"class": [f"language-{language}"]})
        pre.append(code)
        self.container.append(pre)

        if highlighted is None:
            # Left without "is-loaded" so a client-side highlighter picks it up
            code.string = source
            return

        fragment = BeautifulSoup(highlighted, "html.parser")
        for node in list(fragment.contents):
            code.append(node.extract())
        code["class"] = [f"language-{language}", "is-loaded"]

    def add_output_area(self) -> SoupOutputSink:
        pre = self.soup.new_tag("pre", attrs={"class": [OUTPUT_CLASS]})
        self.container.append(pre)
        return SoupOutputSink(self.soup, pre)
