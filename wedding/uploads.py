"""
Multi-file photo uploads: compress, store, insert, with bounded concurrency.
"""

from __future__ import annotations

import concurrent.futures
import logging
import random
import string
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Literal, Optional, Sequence, TypeVar

from wedding.db import DbClient, PhotoRecord
from wedding.images import DEFAULT_MAX_SIZE_MB, compress_image
from wedding.realtime import ChangeFeed, change_event, publish_quietly
from wedding.storage import StorageClient, bucket_for_gallery

logger = logging.getLogger(__name__)

UPLOAD_CONCURRENCY = 5

T = TypeVar("T")


@dataclass
class SettledResult:
    status: Literal["fulfilled", "rejected"]
    value: Any = None
    reason: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == "fulfilled"


def run_with_concurrency(
    tasks: Sequence[Callable[[], T]], concurrency: int = UPLOAD_CONCURRENCY
) -> list[SettledResult]:
    """
    Run zero-argument tasks with at most `concurrency` in flight.

    Each task's outcome is settled independently; results come back in the
    original task order regardless of completion order.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1")
    if not tasks:
        return []

    results: list[Optional[SettledResult]] = [None] * len(tasks)
    max_workers = min(concurrency, len(tasks))
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(task): index for index, task in enumerate(tasks)}
        for future in concurrent.futures.as_completed(futures):
            index = futures[future]
            exc = future.exception()
            if exc is None:
                results[index] = SettledResult(status="fulfilled", value=future.result())
            else:
                results[index] = SettledResult(status="rejected", reason=exc)
    return results


@dataclass
class UploadFile:
    """Raw file handed to the upload flow."""

    name: str
    data: bytes


@dataclass
class FileUploadResult:
    file_name: str
    status: Literal["done", "error", "skipped"]
    photo: Optional[dict] = None
    error: Optional[str] = None


@dataclass
class UploadSummary:
    uploaded: int
    failed: int
    skipped: int
    results: list[FileUploadResult]


def random_suffix(length: int = 6) -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choices(alphabet, k=length))


def photo_storage_path(index: int) -> str:
    return f"{int(time.time() * 1000)}_{random_suffix()}_{index}.jpg"


def upload_photos(
    files: Sequence[UploadFile],
    *,
    guest_name: str,
    gallery: str,
    db: DbClient,
    storage: StorageClient,
    feed: ChangeFeed,
    caption: Optional[str] = None,
    available_slots: Optional[int] = None,
    concurrency: int = UPLOAD_CONCURRENCY,
) -> UploadSummary:
    """
    Upload a batch of photos into a gallery.

    Files beyond `available_slots` are skipped. The rest run compress ->
    store -> insert through the bounded runner; completed uploads are never
    rolled back when a sibling fails.
    """
    bucket = bucket_for_gallery(gallery)
    caption = (caption or "").strip() or None
    accepted = list(files) if available_slots is None else list(files[:available_slots])
    skipped = list(files[len(accepted):])

    def make_task(index: int, upload: UploadFile) -> Callable[[], PhotoRecord]:
        def task() -> PhotoRecord:
            compressed = compress_image(upload.data, max_size_mb=DEFAULT_MAX_SIZE_MB)
            path = photo_storage_path(index)
            storage.upload_bytes(bucket, path, compressed, content_type="image/jpeg")
            photo = db.save_photo(
                PhotoRecord(
                    gallery=gallery,
                    guest_name=guest_name,
                    photo_url=storage.public_url(bucket, path),
                    storage_path=path,
                    caption=caption,
                )
            )
            publish_quietly(
                feed, f"photos-{gallery}", change_event("INSERT", "photos", asdict(photo))
            )
            return photo

        return task

    settled = run_with_concurrency(
        [make_task(i, upload) for i, upload in enumerate(accepted)], concurrency
    )

    results: list[FileUploadResult] = []
    for upload, outcome in zip(accepted, settled):
        if outcome.ok:
            results.append(
                FileUploadResult(
                    file_name=upload.name, status="done", photo=asdict(outcome.value)
                )
            )
        else:
            logger.error(
                "Error uploading %s for %s",
                upload.name,
                guest_name,
                exc_info=outcome.reason,
            )
            results.append(
                FileUploadResult(
                    file_name=upload.name,
                    status="error",
                    error=str(outcome.reason) or "Unknown error",
                )
            )
    for upload in skipped:
        results.append(FileUploadResult(file_name=upload.name, status="skipped"))

    uploaded = sum(1 for r in results if r.status == "done")
    failed = sum(1 for r in results if r.status == "error")
    logger.info(
        "Upload batch for %s into %s: %d uploaded, %d failed, %d skipped",
        guest_name,
        gallery,
        uploaded,
        failed,
        len(skipped),
    )
    return UploadSummary(
        uploaded=uploaded, failed=failed, skipped=len(skipped), results=results
    )
