"""
Name matching engine.

This module provides name standardization, phonetic keys, fuzzy and combined
scoring, and ranked search over a collection of name records.
"""

from .standardizer import standardize_name
from .phonetic import phonetic_key, phonetic_equivalent
from .fuzzy import fuzzy_score, bigram_similarity
from .matcher import MatchAlgorithm, NameMatcher
from .search import search_names

__all__ = [
    'standardize_name',
    'phonetic_key',
    'phonetic_equivalent',
    'fuzzy_score',
    'bigram_similarity',
    'MatchAlgorithm',
    'NameMatcher',
    'search_names',
]
