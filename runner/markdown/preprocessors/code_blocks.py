"""
Preprocessor that lifts fenced Python blocks out of the markdown.

Converts:
    ```python
    # run
    print("hello")
    ```

into a placeholder Pandoc passes through untouched:

    <div id="runner-block-3f9c2a7e10b4d6e8-0" class="runner-block"></div>

The block source is stored in context["code_blocks"] (indexed by the number in
the placeholder id) so the code_runner postprocessor can render and execute it
after Pandoc has produced the HTML.

The hex part of the id is a random token generated once per render and kept in
context["code_block_token"]. Markdown may contain raw HTML, so a hand-written
placeholder must not be mistaken for one of ours.

Fences of other languages are left as they are.
"""

import re
import secrets
from typing import List

CODE_BLOCKS_KEY = "code_blocks"
TOKEN_KEY = "code_block_token"
PLACEHOLDER_CLASS = "runner-block"
PLACEHOLDER_ID_PREFIX = "runner-block-"

DEFAULT_LANGUAGES = ("python",)

# Opening fence with an info string (``` python, ~~~python, ```{.python}),
# the body, then a closing fence made of the same characters.
_FENCE_RE = re.compile(
    r"^(?P<indent>[ ]{0,3})(?P<fence>`{3,}|~{3,})[ \t]*"
    r"(?:\{[ \t]*\.?(?P<attr_lang>[\w+-]+)[^}\n]*\}|(?P<lang>[\w+-]+))?[^\n]*\n"
    r"(?P<code>.*?)"
    r"^[ ]{0,3}(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


def placeholder_id(token: str, index: int) -> str:
    return f"{PLACEHOLDER_ID_PREFIX}{token}-{index}"


def _dedent(code: str, indent: int) -> str:
    if not indent:
        return code
    lines = code.split("\n")
    return "\n".join(
        line[min(indent, len(line) - len(line.lstrip(" "))):] for line in lines
    )


def extract_code_blocks(
    text: str,
    context: dict,
    languages: tuple = DEFAULT_LANGUAGES,
) -> str:
    """
    Replace fenced blocks of the given languages with placeholders.

    Args:
        text: Raw markdown text
        context: Render context, receives the extracted sources
        languages: Info-string languages to extract (default: python)

    Returns:
        Markdown with placeholders instead of the extracted blocks
    """
    blocks: List[str] = context.setdefault(CODE_BLOCKS_KEY, [])
    token = context.setdefault(TOKEN_KEY, secrets.token_hex(8))

    def replace_block(match):
        language = (match.group("attr_lang") or match.group("lang") or "").lower()
        if language not in languages:
            return match.group(0)

        code = match.group("code")
        if code.endswith("\n"):
            code = code[:-1]
        code = _dedent(code, len(match.group("indent")))

        index = len(blocks)
        blocks.append(code)
        return (
            f'\n<div id="{placeholder_id(token, index)}" '
            f'class="{PLACEHOLDER_CLASS}"></div>\n'
        )

    return _FENCE_RE.sub(replace_block, text)


def code_block_extractor_default(text: str, context: dict) -> str:
    """
    Default configuration for code_block_extractor.

    Register this in PREPROCESSORS.
    """
    return extract_code_blocks(text, context, languages=DEFAULT_LANGUAGES)
