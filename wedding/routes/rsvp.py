"""
RSVP routes.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends

from wedding.auth import GuestSession, require_admin, require_guest
from wedding.db import DbClient, RsvpRecord
from wedding.dependencies import get_db_client
from wedding.schemas import RsvpListResponse, RsvpRequest, RsvpResponse, RsvpSummary
from wedding.story import clean_text

logger = logging.getLogger(__name__)

router = APIRouter()


def build_rsvp_record(guest_name: str, payload: RsvpRequest) -> RsvpRecord:
    """Companion and children details only count when their flag is set."""
    return RsvpRecord(
        guest_name=guest_name,
        attending=payload.attending,
        plus_one=payload.plus_one,
        plus_one_name=clean_text(payload.plus_one_name) if payload.plus_one else None,
        children=payload.children,
        children_count=payload.children_count if payload.children else 0,
        dietary_restrictions=clean_text(payload.dietary_restrictions),
        message=clean_text(payload.message),
    )


@router.post("/rsvp", response_model=RsvpResponse, status_code=201)
def submit_rsvp(
    payload: RsvpRequest,
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
):
    record = db.save_rsvp(build_rsvp_record(session.guest_name, payload))
    logger.info(
        "RSVP from %s (attending=%s)", record.guest_name, record.attending
    )
    return RsvpResponse(**asdict(record))


@router.get("/rsvp", response_model=RsvpListResponse)
def list_rsvps(
    _: GuestSession = Depends(require_admin),
    db: DbClient = Depends(get_db_client),
):
    entries = db.list_rsvps()
    summary = RsvpSummary(
        attending=sum(1 for e in entries if e.attending),
        declined=sum(1 for e in entries if not e.attending),
        headcount=sum(e.headcount() for e in entries),
    )
    return RsvpListResponse(
        entries=[RsvpResponse(**asdict(e)) for e in entries], summary=summary
    )
