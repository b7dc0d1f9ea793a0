"""S3 backend implementing IKeyValueStore, one object per key."""

from __future__ import annotations

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from profitshare.core.exceptions import StorageError

_MISSING_CODES = {"NoSuchKey", "404"}

# Connection, credential and transport failures surface as BotoCoreError.
_S3_ERRORS = (ClientError, BotoCoreError)


class S3KeyValueStore:
    """Production IKeyValueStore backed by S3 objects holding UTF-8 JSON."""

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def list_keys(self, prefix: str) -> list[str]:
        try:
            keys: list[str] = []
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                for obj in page.get("Contents", []):
                    keys.append(obj["Key"])
            return keys
        except _S3_ERRORS as exc:
            raise StorageError(f"S3 list failed for prefix={prefix!r}: {exc}") from exc

    def get(self, key: str) -> str | None:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=key)
            body = resp["Body"].read()
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return None
            raise StorageError(f"S3 read failed for {key!r}: {exc}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"S3 read failed for {key!r}: {exc}") from exc
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StorageError(f"S3 object {key!r} is not UTF-8 text: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket, Key=key, Body=value.encode("utf-8"),
                ContentType="application/json",
            )
        except _S3_ERRORS as exc:
            raise StorageError(f"S3 write failed for {key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        except _S3_ERRORS as exc:
            raise StorageError(f"S3 delete failed for {key!r}: {exc}") from exc
