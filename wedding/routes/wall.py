"""
Guestbook wall and collaborative playlist routes.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from wedding.auth import GuestSession, require_admin, require_guest
from wedding.content import DEFAULT_MESSAGE_EMOJI, MESSAGE_EMOJIS
from wedding.db import DbClient, MessageRecord, PlaylistEntryRecord
from wedding.dependencies import get_change_feed, get_db_client
from wedding.errors import NotFoundError, ValidationFailedError
from wedding.realtime import ChangeFeed, change_event, publish_quietly
from wedding.schemas import (
    MessageRequest,
    MessageResponse,
    PlaylistEntryResponse,
    PlaylistRequest,
    StatusResponse,
)
from wedding.story import clean_text

router = APIRouter()


@router.get("/messages", response_model=list[MessageResponse])
def list_messages(db: DbClient = Depends(get_db_client)):
    return [MessageResponse(**asdict(m)) for m in db.list_messages()]


@router.post("/messages", response_model=MessageResponse, status_code=201)
def post_message(
    payload: MessageRequest,
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
    feed: ChangeFeed = Depends(get_change_feed),
):
    text = payload.message.strip()
    if not text:
        raise ValidationFailedError("Message cannot be empty.")
    emoji = payload.emoji or DEFAULT_MESSAGE_EMOJI
    if emoji not in MESSAGE_EMOJIS:
        raise ValidationFailedError(f"Emoji must be one of {' '.join(MESSAGE_EMOJIS)}")

    record = db.save_message(
        MessageRecord(guest_name=session.guest_name, message=text, emoji=emoji)
    )
    publish_quietly(feed, "messages", change_event("INSERT", "messages", asdict(record)))
    return MessageResponse(**asdict(record))


@router.delete("/messages/{message_id}", response_model=StatusResponse)
def delete_message(
    message_id: str,
    _: GuestSession = Depends(require_admin),
    db: DbClient = Depends(get_db_client),
    feed: ChangeFeed = Depends(get_change_feed),
):
    if not db.delete_message(message_id):
        raise NotFoundError("Message not found")
    publish_quietly(
        feed, "messages", change_event("DELETE", "messages", {"id": message_id})
    )
    return StatusResponse(status="ok")


@router.get("/playlist", response_model=list[PlaylistEntryResponse])
def list_playlist(db: DbClient = Depends(get_db_client)):
    return [PlaylistEntryResponse(**asdict(e)) for e in db.list_playlist_entries()]


@router.post("/playlist", response_model=PlaylistEntryResponse, status_code=201)
def add_song(
    payload: PlaylistRequest,
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
    feed: ChangeFeed = Depends(get_change_feed),
):
    song = payload.song.strip()
    if not song:
        raise ValidationFailedError("Song cannot be empty.")
    record = db.save_playlist_entry(
        PlaylistEntryRecord(
            guest_name=session.guest_name,
            song=song,
            artist=clean_text(payload.artist),
        )
    )
    publish_quietly(
        feed, "playlist", change_event("INSERT", "playlist_entries", asdict(record))
    )
    return PlaylistEntryResponse(**asdict(record))
