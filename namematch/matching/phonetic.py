"""
Phonetic keys for Hindi name romanizations.

The key is a consonant skeleton: aspirated digraphs and doubled vowels are
folded to one letter, vowels are dropped and repeated letters collapsed.
'Sureesh' and 'Suresh' both reduce to 'srs'.
"""

import logging
import re
from typing import List, Tuple

logger = logging.getLogger(__name__)

_NON_LETTERS = re.compile(r'[^a-z\s]')
_WHITESPACE = re.compile(r'\s+')

# Applied in order after cleaning.
PHONETIC_REDUCTIONS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'sh'), 's'),
    (re.compile(r'ee'), 'i'),
    (re.compile(r'oo'), 'u'),
    (re.compile(r'aa'), 'a'),
    (re.compile(r'ch'), 'c'),
    (re.compile(r'th'), 't'),
    (re.compile(r'dh'), 'd'),
    (re.compile(r'bh'), 'b'),
    (re.compile(r'gh'), 'g'),
    (re.compile(r'kh'), 'k'),
    (re.compile(r'ph'), 'f'),
    (re.compile(r'zz'), 'z'),
    (re.compile(r'rr'), 'r'),
    # Vowels
    (re.compile(r'[aeiou]'), ''),
    # Repeated characters
    (re.compile(r'(.)\1+'), r'\1'),
]


def phonetic_key(text: str) -> str:
    """
    Get the phonetic key of a name.

    Args:
        text: Name to encode; other values are converted with str()

    Returns:
        Consonant skeleton; may be empty (e.g. for an all-vowel name)
    """
    if not text:
        return ''

    key = str(text).lower().strip()
    key = _NON_LETTERS.sub('', key)
    key = _WHITESPACE.sub(' ', key)

    for pattern, replacement in PHONETIC_REDUCTIONS:
        key = pattern.sub(replacement, key)

    return key.strip()


def phonetic_equivalent(name1: str, name2: str) -> bool:
    """True if both names reduce to the same phonetic key."""
    try:
        key1 = phonetic_key(name1)
        key2 = phonetic_key(name2)
    except Exception as e:
        logger.warning(f"Phonetic comparison failed for {name1!r} vs {name2!r}: {e}")
        return False

    logger.debug(f"Phonetic comparison: {name1!r} -> {key1!r} vs {name2!r} -> {key2!r}")
    return key1 == key2
