"""
Name matching engine.

Dispatches a pair of names to the fuzzy, phonetic or combined algorithm.
"""

import logging
from enum import Enum

from .fuzzy import fuzzy_score
from .phonetic import phonetic_equivalent

logger = logging.getLogger(__name__)


class MatchAlgorithm(str, Enum):
    """Available scoring algorithms."""
    FUZZY = "fuzzy"
    PHONETIC = "phonetic"
    COMBINED = "combined"

    @classmethod
    def parse(cls, value) -> 'MatchAlgorithm':
        """Resolve an algorithm name; anything unrecognized is COMBINED."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            return cls.COMBINED


class NameMatcher:
    """
    Scores two names with one of the matching algorithms.

    Scores:
    - fuzzy: bigram similarity with variant and phonetic boosts
    - phonetic: 0.8 when phonetic keys match, otherwise 0.1
    - combined: fuzzy score + 0.4 when phonetic keys match, capped at 1.0
    """

    PHONETIC_MATCH_SCORE = 0.8
    PHONETIC_MISS_SCORE = 0.1
    COMBINED_PHONETIC_BONUS = 0.4

    @staticmethod
    def fuzzy_match(query: str, name: str) -> float:
        """Fuzzy score between 0.0 and 1.0."""
        return fuzzy_score(query, name)

    @staticmethod
    def phonetic_match(query: str, name: str) -> bool:
        """True if both names share a phonetic key."""
        return phonetic_equivalent(query, name)

    @classmethod
    def combined_match(cls, query: str, name: str) -> float:
        """
        Fuzzy score plus a bonus for phonetically equivalent names.

        Args:
            query: Searched name
            name: Candidate name

        Returns:
            Score between 0.0 and 1.0
        """
        try:
            fuzzy = fuzzy_score(query, name)
            bonus = cls.COMBINED_PHONETIC_BONUS if phonetic_equivalent(query, name) else 0.0
            combined = min(fuzzy + bonus, 1.0)
        except Exception as e:
            logger.warning(f"Combined match failed for {query!r} vs {name!r}: {e}")
            return 0.0

        logger.debug(
            f"Combined match: {query!r} vs {name!r} -> "
            f"fuzzy {fuzzy:.2f}, phonetic {bonus}, combined {combined:.2f}"
        )
        return combined

    @classmethod
    def score(cls, query: str, name: str, algorithm=MatchAlgorithm.COMBINED) -> float:
        """
        Score two names with the given algorithm.

        Args:
            query: Searched name
            name: Candidate name
            algorithm: MatchAlgorithm or its name; unknown names use combined

        Returns:
            Score between 0.0 and 1.0
        """
        algorithm = MatchAlgorithm.parse(algorithm)

        if algorithm is MatchAlgorithm.FUZZY:
            return cls.fuzzy_match(query, name)
        if algorithm is MatchAlgorithm.PHONETIC:
            if cls.phonetic_match(query, name):
                return cls.PHONETIC_MATCH_SCORE
            return cls.PHONETIC_MISS_SCORE
        return cls.combined_match(query, name)
