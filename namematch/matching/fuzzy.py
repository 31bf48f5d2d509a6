"""
Fuzzy string scoring for person names.

The baseline is the bigram Dice coefficient; known transliteration variants
and phonetically equivalent names are boosted on top of it.
"""

import logging
from collections import Counter
from typing import List, Tuple

from .phonetic import phonetic_equivalent

logger = logging.getLogger(__name__)

EXACT_SCORE = 1.0
CONTAINS_SCORE = 0.9
VARIANT_BOOST = 0.3
PHONETIC_BOOST = 0.2

# Common Hindi name spellings that refer to the same name.
# A pair matches when one name contains either side and the other name
# contains the opposite side.
COMMON_VARIATIONS: List[Tuple[str, str]] = [
    ('sureesh', 'suresh'),
    ('sursh', 'suresh'),
    ('ramesh', 'rames'),
    ('kumar', 'kummar'),
    ('singh', 'sing'),
    ('yadav', 'yadhav'),
]


def _bigrams(text: str) -> Counter:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def bigram_similarity(first: str, second: str) -> float:
    """
    Dice coefficient over the character bigrams of two strings.

    Shared bigrams are counted with multiplicity.

    Args:
        first: First string
        second: Second string

    Returns:
        Similarity between 0.0 and 1.0
    """
    if len(first) < 2 or len(second) < 2:
        return 1.0 if first == second else 0.0

    first_bigrams = _bigrams(first)
    second_bigrams = _bigrams(second)
    shared = sum((first_bigrams & second_bigrams).values())
    total = (len(first) - 1) + (len(second) - 1)

    return 2.0 * shared / total


def _is_known_variation(query: str, name: str) -> bool:
    for variant_from, variant_to in COMMON_VARIATIONS:
        if (variant_from in query and variant_to in name) or \
                (variant_to in query and variant_from in name):
            return True
    return False


def fuzzy_score(query: str, name: str) -> float:
    """
    Score how closely two names match.

    Rules, first match wins:
    1. Exact match (case-insensitive): 1.0
    2. One name contains the other: 0.9
    3. Known spelling variation: bigram similarity + 0.3
    4. Phonetically equivalent: bigram similarity + 0.2
    5. Otherwise the bigram similarity

    Args:
        query: Searched name
        name: Candidate name

    Returns:
        Score between 0.0 and 1.0; 0.0 if the inputs cannot be compared
    """
    try:
        clean_query = query.lower().strip()
        clean_name = name.lower().strip()

        if clean_query == clean_name:
            return EXACT_SCORE

        if clean_query in clean_name or clean_name in clean_query:
            return CONTAINS_SCORE

        similarity = bigram_similarity(clean_query, clean_name)

        if _is_known_variation(clean_query, clean_name):
            return min(similarity + VARIANT_BOOST, 1.0)

        if phonetic_equivalent(clean_query, clean_name):
            return min(similarity + PHONETIC_BOOST, 1.0)

        return similarity

    except Exception as e:
        logger.warning(f"Fuzzy match failed for {query!r} vs {name!r}: {e}")
        return 0.0
