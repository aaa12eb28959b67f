"""
Utilities Module
Helper functions for the TravelAI service
"""

from .text_helpers import (
    contains_any,
    title_case_words,
    truncate_text,
    collapse_whitespace
)

__all__ = [
    "contains_any",
    "title_case_words",
    "truncate_text",
    "collapse_whitespace"
]
