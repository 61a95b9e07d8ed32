# runner/markdown/preprocessors/__init__.py

from .code_blocks import code_block_extractor_default

PREPROCESSORS = [
    code_block_extractor_default,  # Lift fenced python blocks out before Pandoc sees them
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
