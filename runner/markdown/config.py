def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Python code blocks never reach Pandoc: the code_blocks preprocessor swaps
    them for raw HTML placeholders, which is why raw_html must stay enabled.
    Other fenced languages are highlighted by Pandoc itself.
    """
    return {
        "extra_args": [
            # Enable Pandoc markdown extensions (all in --from argument)
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+pipe_tables+definition_lists+footnotes+fenced_code_blocks+fenced_code_attributes+backtick_code_blocks+raw_html+native_divs+smart",
            # Code highlighting
            # "--syntax-highlighting=pygments",
        ],
        "filters": [],
    }
