"""Query tokenizer and field-weighted ranking engine."""

from layersearch.search.ranking import FIELD_WEIGHTS, MatchResult, rank, score_record
from layersearch.search.tokenizer import TokenSet, normalize

__all__ = ["FIELD_WEIGHTS", "MatchResult", "TokenSet", "normalize", "rank", "score_record"]
