# normalization.py
from typing import List, Optional

SEPARATOR = " "


def normalize(text: Optional[str]) -> str:
    """
    Canonicalize text before comparison.

    - None, empty or whitespace-only input gives "".
    - Splits on the literal space only; tabs and newlines stay inside tokens.
    - Runs of spaces collapse, leading/trailing spaces vanish, result is lowercased.
    """
    if not text or text.isspace():
        return ""
    return SEPARATOR.join(t for t in text.split(SEPARATOR) if t).lower()


def tokenize(normalized: str) -> List[str]:
    if not normalized:
        return []
    return normalized.split(SEPARATOR)


__all__ = ["normalize", "tokenize"]
