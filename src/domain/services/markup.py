"""Rich-text markup helpers."""

import re

_TAG_RE = re.compile(r"<[^>]*>")


def strip_markup(content: str) -> str:
    """Remove every ``<...>`` span.

    A plain regex strip, not an HTML parser: malformed markup may leave
    stray characters behind.
    """
    return _TAG_RE.sub("", content)


def has_text(content: str) -> bool:
    """Whether markup has any visible text once tags and whitespace are gone."""
    return bool(strip_markup(content).strip())


def truncate_content(content: str, max_length: int = 150) -> str:
    """Card preview of a note body.

    Short bodies come back untouched, markup included. Long ones are cut to
    ``max_length`` characters of plain text followed by an ellipsis.
    """
    text = strip_markup(content)
    if len(text) <= max_length:
        return content
    return text[:max_length] + "..."
