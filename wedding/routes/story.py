"""
Our story timeline routes. Editing is gated by the admin PIN.
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from wedding.auth import require_admin_pin
from wedding.db import DbClient, MilestoneRecord
from wedding.dependencies import get_db_client, get_storage_client
from wedding.errors import NotFoundError, ValidationFailedError
from wedding.images import compress_image
from wedding.schemas import (
    ImageUploadResponse,
    MilestoneRequest,
    MilestoneResponse,
    ReorderRequest,
    StatusResponse,
    StoryResponse,
)
from wedding.storage import COUPLE_GALLERY_BUCKET, STORY_IMAGES_PREFIX, StorageClient
from wedding.story import (
    clean_text,
    default_milestones,
    is_valid_spotify_url,
    to_spotify_embed_url,
)
from wedding.uploads import random_suffix

logger = logging.getLogger(__name__)

router = APIRouter()


def milestone_response(milestone: MilestoneRecord) -> MilestoneResponse:
    return MilestoneResponse(
        id=milestone.id,
        order=milestone.order,
        title=milestone.title,
        date=milestone.date,
        description=milestone.description,
        image_url=milestone.image_url,
        spotify_url=milestone.spotify_url,
        spotify_embed_url=to_spotify_embed_url(milestone.spotify_url)
        if is_valid_spotify_url(milestone.spotify_url)
        else None,
    )


@router.get("/story", response_model=StoryResponse)
def get_story(db: DbClient = Depends(get_db_client)):
    milestones = db.list_milestones()
    is_default = not milestones
    if is_default:
        milestones = default_milestones()
    return StoryResponse(
        milestones=[milestone_response(m) for m in milestones], is_default=is_default
    )


@router.post(
    "/story",
    response_model=MilestoneResponse,
    dependencies=[Depends(require_admin_pin)],
)
def save_milestone(payload: MilestoneRequest, db: DbClient = Depends(get_db_client)):
    title = clean_text(payload.title)
    if not title:
        raise ValidationFailedError("Title is required.")
    spotify_url = clean_text(payload.spotify_url)
    if spotify_url and not is_valid_spotify_url(spotify_url):
        raise ValidationFailedError("Spotify link must point to open.spotify.com.")

    fields = dict(
        order=payload.order,
        title=title,
        date=clean_text(payload.date),
        description=clean_text(payload.description),
        image_url=clean_text(payload.image_url),
        spotify_url=spotify_url,
    )
    # Upsert: an unknown id, such as default-N, is inserted as given.
    if payload.id:
        milestone = MilestoneRecord(id=payload.id, **fields)
    else:
        milestone = MilestoneRecord(**fields)
    saved = db.save_milestone(milestone)
    logger.info("Saved story milestone %s (%s)", saved.id, saved.title)
    return milestone_response(saved)


@router.delete(
    "/story/{milestone_id}",
    response_model=StatusResponse,
    dependencies=[Depends(require_admin_pin)],
)
def delete_milestone(milestone_id: str, db: DbClient = Depends(get_db_client)):
    if not db.delete_milestone(milestone_id):
        raise NotFoundError("Milestone not found")
    return StatusResponse(status="ok")


@router.post(
    "/story/reorder",
    response_model=StoryResponse,
    dependencies=[Depends(require_admin_pin)],
)
def reorder_story(payload: ReorderRequest, db: DbClient = Depends(get_db_client)):
    if len(set(payload.ids)) != len(payload.ids):
        raise ValidationFailedError("Duplicate milestone ids.")
    db.reorder_milestones(payload.ids)
    return StoryResponse(
        milestones=[milestone_response(m) for m in db.list_milestones()],
        is_default=False,
    )


@router.post(
    "/story/image",
    response_model=ImageUploadResponse,
    dependencies=[Depends(require_admin_pin)],
)
async def upload_story_image(
    file: UploadFile = File(...),
    storage: StorageClient = Depends(get_storage_client),
):
    data = await file.read()
    try:
        compressed = await run_in_threadpool(compress_image, data)
    except ValueError as exc:
        raise ValidationFailedError(str(exc)) from exc

    path = f"{STORY_IMAGES_PREFIX}{int(time.time() * 1000)}_{random_suffix()}.jpg"
    await run_in_threadpool(
        storage.upload_bytes, COUPLE_GALLERY_BUCKET, path, compressed, "image/jpeg"
    )
    return ImageUploadResponse(url=storage.public_url(COUPLE_GALLERY_BUCKET, path))
