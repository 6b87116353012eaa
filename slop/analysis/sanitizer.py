"""Prompt text sanitization."""

import re

_HTML_TAG = re.compile(r"<[^>]*>")
_ANGLE_BRACKETS = re.compile(r"[<>]")
_WHITESPACE = re.compile(r"\s+")


def sanitize(raw: str) -> str:
    """Strip markup and normalize whitespace.

    Removes HTML tags, stray angle brackets, collapses whitespace runs
    to a single space and trims the result. Non-string input becomes "".
    """
    if not isinstance(raw, str):
        return ""

    text = _HTML_TAG.sub("", raw)
    text = _ANGLE_BRACKETS.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()
