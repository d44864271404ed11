"""Field-weighted substring ranking of catalog records.

Scoring per searchable field:
  - every token is a substring of the field   -> weight * 1.0
  - some but not all tokens are substrings    -> weight * 0.5
  - no token matches                          -> 0

A record's score is the sum over fields, so a record matching in both
name and agency outranks one matching in name alone. Records scoring 0
are dropped. Output is sorted by score descending, then name ascending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from loguru import logger

from layersearch.catalog.record import CatalogRecord
from layersearch.search.tokenizer import TokenSet

# Searchable fields and their weights. Name dominates as the primary identifier.
FIELD_WEIGHTS: dict[str, float] = {
    "name": 2.0,
    "agency": 1.0,
}

FULL_MATCH = 1.0
PARTIAL_MATCH = 0.5


@dataclass(frozen=True)
class MatchResult:
    """A catalog record scored against a query.

    Attributes:
        record: The matched CatalogRecord.
        score: Sum of weighted field contributions (always > 0 in rank output).
        matched_fields: Names of fields with a non-zero contribution,
            in FIELD_WEIGHTS order.
    """

    record: CatalogRecord
    score: float
    matched_fields: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.record.name


def field_coverage(tokens: TokenSet, value: str) -> float:
    """Return FULL_MATCH, PARTIAL_MATCH or 0.0 for one field value."""
    if not tokens:
        return 0.0
    haystack = value.lower()
    hits = sum(1 for token in tokens if token in haystack)
    if hits == len(tokens):
        return FULL_MATCH
    if hits:
        return PARTIAL_MATCH
    return 0.0


def score_record(tokens: TokenSet, record: CatalogRecord) -> MatchResult:
    """Score a single record against a token set."""
    score = 0.0
    matched: list[str] = []
    for field_name, weight in FIELD_WEIGHTS.items():
        value = getattr(record, field_name) or ""
        contribution = weight * field_coverage(tokens, value)
        if contribution > 0:
            score += contribution
            matched.append(field_name)
    return MatchResult(record=record, score=score, matched_fields=tuple(matched))


def rank(
    tokens: TokenSet,
    catalog: Iterable[CatalogRecord],
    predicate: Callable[[CatalogRecord], bool] | None = None,
) -> list[MatchResult]:
    """Rank catalog records against a token set.

    Args:
        tokens: Normalized query tokens. Empty tokens yield no results.
        catalog: Records to score.
        predicate: Optional caller filter; records for which it returns
            False are never scored.

    Returns:
        MatchResults with score > 0, best first, ties broken by name.
    """
    if not tokens:
        return []

    results: list[MatchResult] = []
    for record in catalog:
        if predicate is not None and not predicate(record):
            continue
        result = score_record(tokens, record)
        if result.score > 0:
            results.append(result)

    results.sort(key=lambda r: (-r.score, r.record.name))
    logger.debug(f"Ranked {len(results)} matches for tokens {list(tokens)}")
    return results
