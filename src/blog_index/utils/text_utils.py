"""Text utilities for post content processing."""

import math
from datetime import date


DEFAULT_WORDS_PER_MINUTE = 225


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens in raw markdown."""
    return len(text.split())


def reading_time_minutes(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """
    Estimate reading time for a markdown body.

    Args:
        text: Raw (unrendered) markdown body
        words_per_minute: Reading speed

    Returns:
        Whole minutes, rounded up; at least 1 for any non-empty body and
        0 for an empty or whitespace-only body.
    """
    if words_per_minute < 1:
        raise ValueError("words_per_minute must be at least 1")

    words = count_words(text)
    if words == 0:
        return 0
    return max(1, math.ceil(words / words_per_minute))


def format_display_date(value: date) -> str:
    """Format a date for display, e.g. 'June 1, 2024'."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Fit text on one line of at most ``max_length`` characters.

    Runs of whitespace, newlines included, collapse to single spaces. The cut
    falls on the last word boundary that leaves room for ``suffix``; a single
    overlong word is cut mid-word.
    """
    text = " ".join(text.split())
    if len(text) <= max_length:
        return text

    head = text[:max(max_length - len(suffix), 0)]
    if " " in head:
        head = head.rsplit(" ", 1)[0]
    return head.rstrip() + suffix
