"""Text matching helpers for comment keywords and issue references."""

import re
from collections.abc import Iterable

REFERENCE_PATTERN = re.compile(r"#(\d+)")


def extract_reference(text: str | None) -> int | None:
    """Extract the first ``#<number>`` reference from free text.

    Args:
        text: Body of an issue, pull request or comment

    Returns:
        The referenced number, or None when the text holds no reference

    Example:
        >>> extract_reference("fixes #42 please")
        42
    """
    if not text:
        return None
    match = REFERENCE_PATTERN.search(text)
    return int(match.group(1)) if match else None


def contains_keyword(text: str | None, keywords: Iterable[str]) -> bool:
    """Check whether any keyword occurs in the text as a literal substring.

    Matching is case-sensitive with no normalization or word boundaries.
    """
    if not text:
        return False
    return any(keyword in text for keyword in keywords)
