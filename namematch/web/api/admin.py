"""Admin-only endpoints: statistics, algorithm comparison, bulk tools."""

import logging
from collections import Counter
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from ...matching import NameMatcher, standardize_name
from ...storage.users import public_user
from ..security import require_admin
from .names import as_percent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


class NamePair(BaseModel):
    name1: str = ""
    name2: str = ""


class BulkStandardizeRequest(BaseModel):
    names: List[str]


@router.get("/stats")
async def stats(request: Request, user: Dict[str, Any] = Depends(require_admin)):
    """Counts over the active records."""
    active = request.app.state.records.get_active_records()

    return {
        "success": True,
        "stats": {
            "total_records": len(active),
            "unique_names": len({record.standardized_name for record in active}),
            "by_type": dict(Counter(record.person_type for record in active)),
            "by_department": dict(Counter(record.department for record in active)),
        },
    }


@router.post("/test-matching")
async def test_matching(body: NamePair, user: Dict[str, Any] = Depends(require_admin)):
    """Run every algorithm on a pair of names side by side."""
    if not body.name1.strip() or not body.name2.strip():
        raise HTTPException(status_code=400, detail="Both names are required")

    return {
        "success": True,
        "comparison": {
            "name1": body.name1,
            "name2": body.name2,
            "fuzzy_score": as_percent(NameMatcher.fuzzy_match(body.name1, body.name2)),
            "phonetic_match": NameMatcher.phonetic_match(body.name1, body.name2),
            "combined_score": as_percent(NameMatcher.combined_match(body.name1, body.name2)),
            "standardized_name1": standardize_name(body.name1),
            "standardized_name2": standardize_name(body.name2),
        },
    }


@router.post("/bulk-standardize")
async def bulk_standardize(
    body: BulkStandardizeRequest,
    user: Dict[str, Any] = Depends(require_admin),
):
    return {
        "success": True,
        "results": [
            {"original": name, "standardized": standardize_name(name)}
            for name in body.names
        ],
    }


@router.get("/users")
async def users(request: Request, user: Dict[str, Any] = Depends(require_admin)):
    return {
        "success": True,
        "users": [public_user(u) for u in request.app.state.users.get_users()],
    }
