"""
Text Helper Utilities
Common string functions shared by the intent parser, the assistant and the
search adapter
"""

from typing import Iterable


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """
    Check whether any keyword occurs in text (case-insensitive substring match)

    Example:
        >>> contains_any("Book a HOTEL in Rome", ["hotel", "flight"])
        True
    """
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def title_case_words(text: str) -> str:
    """
    Capitalize the first letter of each space-separated word

    Unlike str.title() this leaves the rest of each word untouched.

    Example:
        >>> title_case_words("hong kong")
        'Hong Kong'
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length, suffix included

    Example:
        >>> truncate_text("This is a very long description", 20)
        'This is a very lo...'
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())
