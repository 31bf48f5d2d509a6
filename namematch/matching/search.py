"""
Ranked name search over a collection of records.

Every active record is scored against the query; records whose standardized
names equal the standardized query get a flat boost. Results above the
threshold are returned best first.
"""

import logging
from typing import Callable, Iterable, List, Optional

from ..core.record import NameRecord, MatchResult, ScoreEvent
from ..errors import InvalidArgumentError
from .matcher import MatchAlgorithm, NameMatcher
from .standardizer import standardize_name

logger = logging.getLogger(__name__)

STANDARDIZED_MATCH_BOOST = 0.2
DEFAULT_THRESHOLD = 0.3

ScoreHook = Callable[[ScoreEvent], None]


def _standardize_safely(name: str) -> str:
    try:
        return standardize_name(name)
    except Exception as e:
        logger.warning(f"Could not standardize {name!r}: {e}")
        return ''


def _emit(on_score: Optional[ScoreHook], event: ScoreEvent) -> None:
    if on_score is None:
        return
    try:
        on_score(event)
    except Exception as e:
        logger.warning(f"Score hook failed for record {event.record_id}: {e}")


def search_names(
    query: str,
    records: Iterable[NameRecord],
    algorithm=MatchAlgorithm.COMBINED,
    threshold: float = DEFAULT_THRESHOLD,
    on_score: Optional[ScoreHook] = None,
) -> List[MatchResult]:
    """
    Find the records most likely to name the same person as the query.

    Inactive records are never scored. Results must score strictly above the
    threshold. Equal scores are ordered by ascending record id.

    Args:
        query: Name to search for
        records: Record snapshot, active and inactive; not modified
        algorithm: 'fuzzy', 'phonetic' or 'combined' (the default for
            anything unrecognized)
        threshold: Exclusive minimum score
        on_score: Optional callback receiving a ScoreEvent per scored record

    Returns:
        Match results sorted by score (highest first); empty if none qualify

    Raises:
        InvalidArgumentError: If the query is empty or whitespace
    """
    if not query or not query.strip():
        raise InvalidArgumentError("Search query is required")

    query = query.strip()
    algorithm = MatchAlgorithm.parse(algorithm)
    records = list(records)
    active_records = [record for record in records if record.is_active]
    standardized_query = standardize_name(query)

    logger.info(
        f"Searching for {query!r} (standardized {standardized_query!r}) with "
        f"{algorithm.value}, threshold {threshold}: "
        f"{len(active_records)} active of {len(records)} records"
    )

    matches = []
    for record in active_records:
        score = NameMatcher.score(query, record.original_name, algorithm)
        base_score = score

        record_standardized = _standardize_safely(record.original_name)
        boosted = record_standardized == standardized_query
        if boosted:
            score = min(score + STANDARDIZED_MATCH_BOOST, 1.0)

        accepted = score > threshold
        logger.debug(
            f"Record {record.id} {record.original_name!r}: base {base_score:.2f}, "
            f"boost {boosted}, final {score:.2f}, accepted {accepted}"
        )
        _emit(on_score, ScoreEvent(
            record_id=record.id,
            original_name=record.original_name,
            algorithm=algorithm.value,
            base_score=base_score,
            standardized_boost=boosted,
            final_score=score,
            accepted=accepted,
        ))

        if accepted:
            matches.append(MatchResult(
                record=record,
                match_score=score,
                standardized_query=standardized_query,
                record_standardized=record_standardized,
            ))

    matches.sort(key=lambda m: (-m.match_score, m.record.id))

    logger.info(f"Found {len(matches)} matches for {query!r}")
    return matches
