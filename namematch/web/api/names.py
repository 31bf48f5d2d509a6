"""
Name record endpoints.

Supports:
- Ranked name search
- Pairwise test matching
- Standardization
- Record creation, lookup and soft deletion
"""

import logging
import math
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from ...matching import MatchAlgorithm, NameMatcher, search_names, standardize_name
from ..security import get_current_user, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/names", tags=["names"])


class SearchRequest(BaseModel):
    query: str = ""
    algorithm: str = "combined"
    threshold: float = 0.3


class TestMatchRequest(BaseModel):
    name1: str = ""
    name2: str = ""
    algorithm: str = "combined"


class StandardizeRequest(BaseModel):
    name: str = ""


class CreateRecordRequest(BaseModel):
    original_name: str = ""
    person_type: str = ""
    case_number: Optional[str] = None
    department: Optional[str] = None


def as_percent(score: float) -> int:
    """Whole percent, halves rounded up (0.125 -> 13)."""
    return int(math.floor(score * 100 + 0.5))


@router.post("/search")
async def search(
    body: SearchRequest,
    request: Request,
    user: Dict[str, Any] = Depends(get_current_user),
):
    """Search the active records for names matching the query."""
    logger.info(
        f"Search by {user['username']!r}: query={body.query!r} "
        f"algorithm={body.algorithm} threshold={body.threshold}"
    )

    if not body.query.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    records = request.app.state.records.get_records()
    matches = search_names(body.query, records, body.algorithm, body.threshold)

    return {
        "success": True,
        "query": body.query.strip(),
        "algorithm": body.algorithm,
        "threshold": body.threshold,
        "matches_found": len(matches),
        "matches": [
            {
                "id": match.record.id,
                "original_name": match.record.original_name,
                "standardized_name": match.record.standardized_name,
                "person_type": match.record.person_type,
                "case_number": match.record.case_number,
                "department": match.record.department,
                "created_by": match.record.created_by_name,
                "match_score": as_percent(match.match_score),
                "created_at": match.record.created_at,
            }
            for match in matches
        ],
    }


@router.post("/test-match")
async def test_match(
    body: TestMatchRequest,
    user: Dict[str, Any] = Depends(get_current_user),
):
    """Score two names against each other with one algorithm."""
    if not body.name1.strip() or not body.name2.strip():
        raise HTTPException(status_code=400, detail="Both names are required")

    score = NameMatcher.score(body.name1, body.name2, body.algorithm)

    return {
        "success": True,
        "name1": body.name1,
        "name2": body.name2,
        "algorithm": MatchAlgorithm.parse(body.algorithm).value,
        "score": as_percent(score),
        "standardized_name1": standardize_name(body.name1),
        "standardized_name2": standardize_name(body.name2),
        "phonetic_match": NameMatcher.phonetic_match(body.name1, body.name2),
    }


@router.post("/standardize")
async def standardize(
    body: StandardizeRequest,
    user: Dict[str, Any] = Depends(get_current_user),
):
    if not body.name.strip():
        raise HTTPException(status_code=400, detail="Name is required")

    return {
        "success": True,
        "original_name": body.name,
        "standardized_name": standardize_name(body.name),
    }


@router.get("/debug/records")
async def debug_records(
    request: Request,
    user: Dict[str, Any] = Depends(get_current_user),
):
    """Summary of every active record."""
    records = request.app.state.records.get_records()
    active = [record for record in records if record.is_active]

    return {
        "success": True,
        "total_records": len(records),
        "active_records": len(active),
        "records": [
            {
                "id": record.id,
                "original_name": record.original_name,
                "standardized_name": record.standardized_name,
                "person_type": record.person_type,
                "case_number": record.case_number,
            }
            for record in active
        ],
    }


@router.post("", status_code=201)
async def create_record(
    body: CreateRecordRequest,
    request: Request,
    user: Dict[str, Any] = Depends(get_current_user),
):
    """Record a new name; the department defaults to the caller's."""
    if not body.original_name.strip() or not body.person_type.strip():
        raise HTTPException(status_code=400, detail="Original name and person type are required")

    record = request.app.state.records.add_record(
        original_name=body.original_name,
        person_type=body.person_type,
        case_number=body.case_number,
        department=body.department or user.get('department'),
        created_by=user.get('id'),
        created_by_name=user.get('username'),
    )

    return {
        "success": True,
        "message": "Name record created successfully",
        "record": record.to_dict(),
    }


@router.get("/{record_id}")
async def get_record(
    record_id: int,
    request: Request,
    user: Dict[str, Any] = Depends(get_current_user),
):
    record = request.app.state.records.get_record(record_id)
    return {"success": True, "record": record.to_dict()}


@router.delete("/{record_id}")
async def delete_record(
    record_id: int,
    request: Request,
    user: Dict[str, Any] = Depends(require_admin),
):
    """Soft-delete a record; it stays on disk but is never searched again."""
    request.app.state.records.get_record(record_id)
    request.app.state.records.deactivate_record(record_id)
    logger.info(f"Record {record_id} deleted by {user['username']!r}")
    return {"success": True, "message": "Name record deleted"}
