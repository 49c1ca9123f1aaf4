"""S3 object storage backend implementing IObjectStore."""

from __future__ import annotations

from typing import Any

import boto3

from extsqs.core.config import AWSClientConfig


class S3ObjectStore:
    """Production IObjectStore backed by S3.

    ``ClientError`` (missing key, access denied, throttling) is left to the
    caller; the batch receiver turns it into a per-message error.
    """

    def __init__(self, aws: AWSClientConfig | None = None,
                 endpoint_url: str | None = None) -> None:
        self._aws = aws or AWSClientConfig()
        self._client = boto3.client("s3", **self._aws.boto_kwargs(endpoint_url=endpoint_url))

    def get(self, bucket: str, key: str) -> bytes:
        resp = self._client.get_object(Bucket=bucket, Key=key)
        return resp["Body"].read()

    def put(self, bucket: str, key: str, data: bytes,
            content_encoding: str | None = None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"Bucket": bucket, "Key": key, "Body": data}
        if content_encoding:
            kwargs["ContentEncoding"] = content_encoding
        return self._client.put_object(**kwargs)
