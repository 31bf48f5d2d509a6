"""
Name standardization for romanized Indian names.

Folds common spelling and transliteration variants onto one canonical
spelling so that records entered by different officers compare equal.
"""

import re
from typing import List, Tuple

# Applied in order; later rules see the output of earlier ones.
# No rule may produce text that an earlier rule would still rewrite:
# 'kumm?arr*' folds both kumar misspellings in one step, and the
# lookaheads stop 'ramesh' and 'singh' from growing another 'h'.
STANDARDIZATION_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'shh+'), 'sh'),
    (re.compile(r'sureesh'), 'suresh'),
    (re.compile(r'sursh'), 'suresh'),
    (re.compile(r'rames(?!h)'), 'ramesh'),
    (re.compile(r'kumm?arr*'), 'kumar'),
    (re.compile(r'jii+'), 'ji'),
    (re.compile(r'sing(?!h)'), 'singh'),
    (re.compile(r'yadhav'), 'yadav'),
    (re.compile(r'choudhury'), 'choudhary'),
    (re.compile(r'chaudhary'), 'choudhary'),
    (re.compile(r'\s+'), ' '),
]


def _capitalize_token(token: str) -> str:
    """Uppercase the first letter only; str.capitalize() would lowercase the rest."""
    return token[:1].upper() + token[1:]


def standardize_name(name: str) -> str:
    """
    Standardize a name to its canonical spelling.

    Args:
        name: Name as entered

    Returns:
        Canonical name with each word capitalized, or '' for blank input
    """
    if not name or not name.strip():
        return ''

    standardized = name.lower().strip()

    for pattern, replacement in STANDARDIZATION_RULES:
        standardized = pattern.sub(replacement, standardized)

    return ' '.join(_capitalize_token(token) for token in standardized.split())
