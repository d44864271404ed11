"""Query normalization - raw query string to a deterministic token set.

Lowercase, split on whitespace, drop empties. No stemming and no
stopwords. Special characters are kept literally inside tokens.
"""

from __future__ import annotations

TokenSet = tuple[str, ...]


def normalize(query: str | None) -> TokenSet:
    """Normalize a raw query into unique tokens in first-seen order.

    Args:
        query: Free-text query. None, empty, and whitespace-only input
            all yield an empty TokenSet.

    Returns:
        Tuple of lowercase tokens with duplicates removed.
    """
    if not query:
        return ()
    seen: dict[str, None] = {}
    for token in query.lower().split():
        seen.setdefault(token, None)
    return tuple(seen)
