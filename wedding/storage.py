"""
Storage abstraction for S3-compatible object storage and in-memory testing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

import boto3
from botocore.config import Config

GUEST_PHOTOS_BUCKET = "fotos-invitados"
CIVIL_PHOTOS_BUCKET = "fotos-civil"
COUPLE_GALLERY_BUCKET = "galeria-pareja"
BINGO_BUCKET = "bingo"

STORY_IMAGES_PREFIX = "historia/"


@dataclass
class StoredObject:
    name: str
    size: int


class StorageClient(Protocol):
    """Defines the operations the API needs from object storage."""

    def upload_bytes(
        self, bucket: str, path: str, data: bytes, content_type: str = "image/jpeg"
    ) -> None:
        ...

    def public_url(self, bucket: str, path: str) -> str:
        ...

    def list_objects(
        self, bucket: str, prefix: str = "", limit: int = 100
    ) -> list[StoredObject]:
        ...

    def delete_object(self, bucket: str, path: str) -> None:
        ...


@dataclass
class InMemoryStorageClient:
    """Test double for storage interactions."""

    base_url: str = "https://example.test/storage"
    stored_objects: dict = field(default_factory=dict)
    fail_paths: set = field(default_factory=set)

    def reset(self) -> None:
        self.stored_objects.clear()
        self.fail_paths.clear()

    def upload_bytes(
        self, bucket: str, path: str, data: bytes, content_type: str = "image/jpeg"
    ) -> None:
        if (bucket, path) in self.stored_objects:
            raise FileExistsError(f"{bucket}/{path}")
        if any(marker in path for marker in self.fail_paths):
            raise IOError(f"Simulated upload failure for {bucket}/{path}")
        self.stored_objects[(bucket, path)] = (data, content_type)

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/{bucket}/{path}"

    def list_objects(
        self, bucket: str, prefix: str = "", limit: int = 100
    ) -> list[StoredObject]:
        names = sorted(
            path
            for (stored_bucket, path) in self.stored_objects
            if stored_bucket == bucket and path.startswith(prefix)
        )
        return [
            StoredObject(name=name, size=len(self.stored_objects[(bucket, name)][0]))
            for name in names[:limit]
        ]

    def delete_object(self, bucket: str, path: str) -> None:
        self.stored_objects.pop((bucket, path), None)


@dataclass
class S3StorageClient:
    """
    S3-compatible storage client (AWS S3, Supabase Storage S3 endpoint, MinIO).
    """

    endpoint: str
    region: str
    access_key_id: str
    secret_access_key: str
    public_base_url: Optional[str] = None

    def __post_init__(self):
        config = Config(
            s3={"addressing_style": "path"},
            signature_version="s3v4",
        )
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint or None,
            region_name=self.region or None,
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            config=config,
        )

    def upload_bytes(
        self, bucket: str, path: str, data: bytes, content_type: str = "image/jpeg"
    ) -> None:
        self._client.put_object(
            Bucket=bucket,
            Key=path,
            Body=data,
            ContentType=content_type,
        )

    def public_url(self, bucket: str, path: str) -> str:
        base = (self.public_base_url or self.endpoint).rstrip("/")
        return f"{base}/{bucket}/{path}"

    def list_objects(
        self, bucket: str, prefix: str = "", limit: int = 100
    ) -> list[StoredObject]:
        response = self._client.list_objects_v2(
            Bucket=bucket, Prefix=prefix, MaxKeys=limit
        )
        objects = [
            StoredObject(name=item["Key"], size=item.get("Size", 0))
            for item in response.get("Contents", [])
        ]
        return sorted(objects, key=lambda o: o.name)

    def delete_object(self, bucket: str, path: str) -> None:
        self._client.delete_object(Bucket=bucket, Key=path)


def bucket_for_gallery(gallery: str) -> str:
    if gallery == "civil":
        return CIVIL_PHOTOS_BUCKET
    return GUEST_PHOTOS_BUCKET
