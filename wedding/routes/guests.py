"""
Access gate, site content and countdown routes.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from wedding.auth import GuestSession, login, require_guest, verify_admin_pin
from wedding.config import Settings, get_settings
from wedding.content import WEDDING
from wedding.countdown import parse_wedding_date, time_left
from wedding.errors import AccessDeniedError
from wedding.schemas import (
    CountdownResponse,
    LoginRequest,
    PinRequest,
    PinResponse,
    SessionResponse,
    StatusResponse,
    WeddingInfoResponse,
)

router = APIRouter()


@router.get("/health", response_model=StatusResponse)
def health():
    return StatusResponse(status="ok")


@router.post("/auth/login", response_model=SessionResponse)
def auth_login(payload: LoginRequest, settings: Settings = Depends(get_settings)):
    session = login(payload.access_code, payload.name, settings)
    return SessionResponse(
        authenticated=True, guest_name=session.guest_name, is_admin=session.is_admin
    )


@router.get("/auth/me", response_model=SessionResponse)
def auth_me(session: GuestSession = Depends(require_guest)):
    return SessionResponse(
        authenticated=True, guest_name=session.guest_name, is_admin=session.is_admin
    )


@router.post("/auth/verify-pin", response_model=PinResponse)
def auth_verify_pin(payload: PinRequest, settings: Settings = Depends(get_settings)):
    if not verify_admin_pin(payload.pin, settings):
        raise AccessDeniedError("Invalid admin PIN.")
    return PinResponse(valid=True)


@router.get("/wedding", response_model=WeddingInfoResponse)
def wedding_info(settings: Settings = Depends(get_settings)):
    return WeddingInfoResponse(
        couple=asdict(WEDDING.couple),
        bank_details=asdict(WEDDING.bank_details),
        thank_you_text=WEDDING.thank_you_text,
        collaboration_text=WEDDING.collaboration_text,
        programme=[asdict(item) for item in WEDDING.programme],
        maps_embed_url=settings.maps_embed_url,
    )


@router.get("/countdown", response_model=CountdownResponse)
def countdown(settings: Settings = Depends(get_settings)):
    remaining = time_left(parse_wedding_date(settings.wedding_date))
    return CountdownResponse(wedding_date=settings.wedding_date, **asdict(remaining))
