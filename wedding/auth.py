"""
Shared-passphrase guest gate and admin checks.

There are no per-user credentials: a guest proves they know the access code
and declares a name. Requests carry both in headers.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header

from wedding.config import Settings, get_settings
from wedding.errors import (
    AccessDeniedError,
    InvalidCodeError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


@dataclass
class GuestSession:
    guest_name: str
    is_admin: bool = False


def is_admin_name(name: Optional[str], settings: Settings) -> bool:
    if not name:
        return False
    lowered = name.strip().lower()
    return any(lowered == admin.lower() for admin in settings.admin_names)


def check_access_code(access_code: Optional[str], settings: Settings) -> bool:
    return (access_code or "").strip().lower() == settings.access_code.strip().lower()


def login(access_code: str, name: str, settings: Settings) -> GuestSession:
    trimmed_name = (name or "").strip()
    if not trimmed_name:
        raise ValidationFailedError("Please enter your name.")
    if not check_access_code(access_code, settings):
        logger.info("Rejected access code for %r", trimmed_name)
        raise InvalidCodeError("Incorrect access code.")
    return GuestSession(
        guest_name=trimmed_name, is_admin=is_admin_name(trimmed_name, settings)
    )


def require_guest(
    x_access_code: Optional[str] = Header(default=None),
    x_guest_name: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> GuestSession:
    if not check_access_code(x_access_code, settings):
        raise InvalidCodeError("Incorrect access code.")
    guest_name = (x_guest_name or "").strip()
    if not guest_name:
        raise ValidationFailedError("Please enter your name.")
    return GuestSession(guest_name=guest_name, is_admin=is_admin_name(guest_name, settings))


def require_admin(session: GuestSession = Depends(require_guest)) -> GuestSession:
    if not session.is_admin:
        raise AccessDeniedError("Only the couple can do this.")
    return session


def verify_admin_pin(pin: Optional[str], settings: Settings) -> bool:
    if not settings.admin_pin or not pin:
        return False
    return hmac.compare_digest(pin.strip(), settings.admin_pin)


def require_admin_pin(
    x_admin_pin: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not verify_admin_pin(x_admin_pin, settings):
        raise AccessDeniedError("Invalid admin PIN.")
