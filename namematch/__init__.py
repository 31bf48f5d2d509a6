"""namematch - Fuzzy and phonetic matching of romanized Indian person names."""

__version__ = "0.1.0"

from .core.record import NameRecord, MatchResult
from .matching import (
    MatchAlgorithm,
    NameMatcher,
    search_names,
    standardize_name,
    phonetic_key,
    phonetic_equivalent,
    fuzzy_score,
)

__all__ = [
    'NameRecord',
    'MatchResult',
    'MatchAlgorithm',
    'NameMatcher',
    'search_names',
    'standardize_name',
    'phonetic_key',
    'phonetic_equivalent',
    'fuzzy_score',
]
