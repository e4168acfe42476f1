"""Telegram MarkdownV2 helpers"""
from typing import Optional
import re

MARKDOWN_V2_SPECIAL_CHARS = "_*[]()~`>#+-=|{}.!"

_SPECIAL_CHARS_PATTERN = re.compile("([" + re.escape(MARKDOWN_V2_SPECIAL_CHARS) + "])")


def escape_markdown_v2(text: Optional[str]) -> str:
    """
    Escape user-supplied text for a MarkdownV2 message

    Each reserved character gets one backslash in front of it. The backslash
    is not in the reserved set, so inserted escapes are never escaped again.

    Args:
        text: Raw text, may be None

    Returns:
        Escaped text, or "" for empty input
    """
    if not text:
        return ""
    return _SPECIAL_CHARS_PATTERN.sub(r"\\\1", text)
