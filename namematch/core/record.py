"""Name record and match result types."""

from dataclasses import dataclass, asdict, fields
from typing import Optional, Dict, Any


@dataclass
class NameRecord:
    """A person name recorded against a case.

    Attributes:
        id: Unique positive id, assigned by the record store and never reused
        original_name: Name as it was entered
        standardized_name: Canonical form computed when the record was created
        person_type: Open tag such as 'suspect', 'witness' or 'victim'
        case_number: Case reference (opaque)
        department: Owning department (opaque)
        created_by: Id of the user who created the record
        created_by_name: Username of the creator
        created_at: ISO-8601 creation timestamp
        is_active: False once the record has been soft-deleted
    """

    id: int
    original_name: str
    standardized_name: str = ''
    person_type: str = ''
    case_number: Optional[str] = None
    department: Optional[str] = None
    created_by: Optional[int] = None
    created_by_name: Optional[str] = None
    created_at: Optional[str] = None
    is_active: bool = True

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        status = '' if self.is_active else ' [inactive]'
        return f"#{self.id} {self.original_name} ({self.person_type}){status}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape used by the record store."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NameRecord':
        """Create from a stored dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class MatchResult:
    """A record that qualified in a search, with its score.

    `record_standardized` is recomputed from `original_name` at search time and
    can differ from the stored `standardized_name` if the rules have changed.
    """

    record: NameRecord
    match_score: float
    standardized_query: str
    record_standardized: str

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def original_name(self) -> str:
        return self.record.original_name

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into the record's dictionary plus the match fields."""
        result = self.record.to_dict()
        result['match_score'] = self.match_score
        result['standardized_query'] = self.standardized_query
        result['record_standardized'] = self.record_standardized
        return result


@dataclass(slots=True)
class ScoreEvent:
    """Scoring decision for a single record during a search."""
    record_id: int
    original_name: str
    algorithm: str
    base_score: float
    standardized_boost: bool
    final_score: float
    accepted: bool
