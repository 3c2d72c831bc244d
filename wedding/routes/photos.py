"""
Guest galleries, the couple's gallery and the OS share target.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import RedirectResponse

from wedding import uploads as upload_flow
from wedding.auth import GuestSession, require_admin, require_guest
from wedding.config import Settings, get_settings
from wedding.db import DbClient
from wedding.dependencies import (
    get_change_feed,
    get_db_client,
    get_share_inbox,
    get_storage_client,
)
from wedding.errors import LimitReachedError, NotFoundError
from wedding.realtime import ChangeFeed, change_event, publish_quietly
from wedding.schemas import (
    GalleryPhoto,
    GalleryResponse,
    PhotoPageResponse,
    PhotoResponse,
    QuotaResponse,
    SharedFileInfo,
    SharedInboxResponse,
    StatusResponse,
    UploadSummaryResponse,
)
from wedding.share_inbox import SharedFile, SharedFileInbox
from wedding.storage import (
    COUPLE_GALLERY_BUCKET,
    STORY_IMAGES_PREFIX,
    StorageClient,
    bucket_for_gallery,
)

logger = logging.getLogger(__name__)

router = APIRouter()

GALLERIES = ("guests", "civil")
COUPLE_GALLERY_LIMIT = 100


def _check_gallery(gallery: str) -> str:
    if gallery not in GALLERIES:
        raise NotFoundError(f"Unknown gallery: {gallery}")
    return gallery


def _available_slots(
    db: DbClient, gallery: str, session: GuestSession, settings: Settings
) -> tuple[int, Optional[int]]:
    """Return (already uploaded, slots left); admins have no limit."""
    uploaded = db.count_guest_photos(gallery, session.guest_name)
    if session.is_admin:
        return uploaded, None
    return uploaded, max(settings.photo_limit_per_guest - uploaded, 0)


def _summary_response(summary: upload_flow.UploadSummary) -> UploadSummaryResponse:
    return UploadSummaryResponse(**asdict(summary))


async def _read_uploads(files: list[UploadFile]) -> list[upload_flow.UploadFile]:
    return [
        upload_flow.UploadFile(
            name=f.filename or "photo",
            data=await f.read(),
        )
        for f in files
    ]


@router.get("/photos/{gallery}", response_model=PhotoPageResponse)
def list_photos(
    gallery: str,
    offset: int = Query(default=0, ge=0),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    db: DbClient = Depends(get_db_client),
    settings: Settings = Depends(get_settings),
):
    _check_gallery(gallery)
    page_size = limit or settings.photos_page_size
    photos = db.list_photos(gallery, offset=offset, limit=page_size)
    return PhotoPageResponse(
        photos=[PhotoResponse(**asdict(p)) for p in photos],
        offset=offset,
        has_more=len(photos) == page_size,
    )


@router.get("/photos/{gallery}/quota", response_model=QuotaResponse)
def photo_quota(
    gallery: str,
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
    settings: Settings = Depends(get_settings),
):
    _check_gallery(gallery)
    uploaded, remaining = _available_slots(db, gallery, session, settings)
    return QuotaResponse(
        uploaded=uploaded,
        limit=None if session.is_admin else settings.photo_limit_per_guest,
        remaining=remaining,
    )


@router.post("/photos/{gallery}", response_model=UploadSummaryResponse)
async def upload_photos(
    gallery: str,
    files: list[UploadFile] = File(...),
    caption: Optional[str] = Form(default=None),
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
    storage: StorageClient = Depends(get_storage_client),
    feed: ChangeFeed = Depends(get_change_feed),
    settings: Settings = Depends(get_settings),
):
    _check_gallery(gallery)
    _, remaining = _available_slots(db, gallery, session, settings)
    if remaining == 0:
        raise LimitReachedError(
            f"You reached the limit of {settings.photo_limit_per_guest} photos."
        )

    pending = await _read_uploads(files)
    summary = await run_in_threadpool(
        upload_flow.upload_photos,
        pending,
        guest_name=session.guest_name,
        gallery=gallery,
        db=db,
        storage=storage,
        feed=feed,
        caption=caption,
        available_slots=remaining,
        concurrency=settings.upload_concurrency,
    )
    return _summary_response(summary)


@router.delete("/photos/{gallery}/{photo_id}", response_model=StatusResponse)
def delete_photo(
    gallery: str,
    photo_id: str,
    _: GuestSession = Depends(require_admin),
    db: DbClient = Depends(get_db_client),
    storage: StorageClient = Depends(get_storage_client),
    feed: ChangeFeed = Depends(get_change_feed),
):
    _check_gallery(gallery)
    photo = db.get_photo(photo_id)
    if not photo or photo.gallery != gallery:
        raise NotFoundError("Photo not found")

    storage.delete_object(bucket_for_gallery(gallery), photo.storage_path)
    db.delete_photo(photo_id)
    publish_quietly(
        feed, f"photos-{gallery}", change_event("DELETE", "photos", {"id": photo_id})
    )
    logger.info("Deleted photo %s from %s", photo_id, gallery)
    return StatusResponse(status="ok")


@router.get("/gallery", response_model=GalleryResponse)
def couple_gallery(storage: StorageClient = Depends(get_storage_client)):
    objects = storage.list_objects(COUPLE_GALLERY_BUCKET, limit=COUPLE_GALLERY_LIMIT)
    visible = sorted(
        (
            o
            for o in objects
            if not o.name.startswith(".") and not o.name.startswith(STORY_IMAGES_PREFIX)
        ),
        key=lambda o: o.name,
    )
    return GalleryResponse(
        photos=[
            GalleryPhoto(
                name=o.name, url=storage.public_url(COUPLE_GALLERY_BUCKET, o.name)
            )
            for o in visible[:COUPLE_GALLERY_LIMIT]
        ]
    )


# Share target


@router.post("/share-target")
async def share_target(
    files: list[UploadFile] = File(default=[]),
    inbox: SharedFileInbox = Depends(get_share_inbox),
    settings: Settings = Depends(get_settings),
):
    shared = [
        SharedFile(name=f.filename or "shared", content_type=f.content_type, data=await f.read())
        for f in files
        if (f.content_type or "").startswith("image/")
    ]
    if not shared:
        logger.info("Share target received no images")
        return RedirectResponse(settings.share_redirect_path, status_code=303)

    token = await run_in_threadpool(inbox.stage, shared)
    logger.info("Staged %d shared files under %s", len(shared), token)
    return RedirectResponse(
        f"{settings.share_redirect_path}?shared={token}", status_code=303
    )


@router.get("/share-target/{token}", response_model=SharedInboxResponse)
def peek_shared(token: str, inbox: SharedFileInbox = Depends(get_share_inbox)):
    files = inbox.peek(token)
    return SharedInboxResponse(
        token=token,
        files=[
            SharedFileInfo(name=f.name, content_type=f.content_type, size=len(f.data))
            for f in files
        ],
    )


@router.post("/share-target/{token}/upload", response_model=UploadSummaryResponse)
def upload_shared(
    token: str,
    session: GuestSession = Depends(require_guest),
    inbox: SharedFileInbox = Depends(get_share_inbox),
    db: DbClient = Depends(get_db_client),
    storage: StorageClient = Depends(get_storage_client),
    feed: ChangeFeed = Depends(get_change_feed),
    settings: Settings = Depends(get_settings),
):
    _, remaining = _available_slots(db, "guests", session, settings)
    if remaining == 0:
        raise LimitReachedError(
            f"You reached the limit of {settings.photo_limit_per_guest} photos."
        )
    shared = inbox.pop_all(token)
    if not shared:
        raise NotFoundError("No shared files found.")

    summary = upload_flow.upload_photos(
        [
            upload_flow.UploadFile(name=f.name, data=f.data)
            for f in shared
        ],
        guest_name=session.guest_name,
        gallery="guests",
        db=db,
        storage=storage,
        feed=feed,
        available_slots=remaining,
        concurrency=settings.upload_concurrency,
    )
    return _summary_response(summary)
