"""Text helpers for messages displayed in plain-text controls."""

import re

# Line break spellings that end up in diagnostics: HTML breaks from
# translated templates, escaped "\n" sequences and Windows line endings.
_LINE_BREAKS = re.compile(r"<br\s*/?>|\\r\\n|\\n|\r\n|\r", re.IGNORECASE)


def normalize_line_breaks(text: str) -> str:
    """Turn every line break spelling into ``\\n`` so a textarea shows them.

    Args:
        text: Message possibly containing ``<br/>`` tags or escaped newlines

    Returns:
        The message with real newline characters only
    """
    return _LINE_BREAKS.sub("\n", text)
