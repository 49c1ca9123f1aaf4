"""SQS queue transport implementing IQueueTransport."""

from __future__ import annotations

from typing import Any

import boto3

from extsqs.core.config import AWSClientConfig, SQSConfig
from extsqs.core.exceptions import ConfigurationError
from extsqs.core.types import AttributeMap, RawMessage


class SQSQueueTransport:
    """Production IQueueTransport backed by SQS, addressed by queue name."""

    def __init__(self, sqs: SQSConfig | None = None, aws: AWSClientConfig | None = None) -> None:
        self._sqs = sqs or SQSConfig()
        self._aws = aws or AWSClientConfig()
        endpoint = self._sqs.endpoint_url
        if endpoint and "://" not in endpoint:
            endpoint = f"https://{endpoint}"
        self._endpoint = endpoint
        self._client = boto3.client("sqs", **self._aws.boto_kwargs(
            endpoint_url=endpoint,
            connect_timeout=self._sqs.connect_timeout,
            read_timeout=self._sqs.timeout,
        ))

    def get_queue_url(self, name: str) -> str:
        if not self._sqs.account:
            raise ConfigurationError("SQS account id required to build queue URLs")
        base = self._endpoint or f"https://sqs.{self._aws.region}.amazonaws.com"
        return f"{base.rstrip('/')}/{self._sqs.account}/{self._sqs.queue_prefix}{name}{self._sqs.queue_suffix}"

    # ---- IQueueTransport methods ----

    def send(self, queue_url: str, body: str, attributes: AttributeMap,
             group_id: str | None = None, dedup_id: str | None = None) -> dict[str, Any]:
        params: dict[str, Any] = {"QueueUrl": queue_url, "MessageBody": body}
        if attributes:
            params["MessageAttributes"] = attributes
        if group_id:
            params["MessageGroupId"] = group_id
        if dedup_id:
            params["MessageDeduplicationId"] = dedup_id
        return self._client.send_message(**params)

    def receive(self, queue_url: str, max_messages: int, wait_seconds: int,
                visibility_timeout: int, attribute_names: list[str]) -> list[RawMessage]:
        resp = self._client.receive_message(
            QueueUrl=queue_url,
            MaxNumberOfMessages=max_messages,
            WaitTimeSeconds=wait_seconds,
            VisibilityTimeout=visibility_timeout,
            MessageAttributeNames=attribute_names,
        )
        return resp.get("Messages", [])

    # ---- queue management ----

    def list_queues(self) -> list[str]:
        urls: list[str] = []
        paginator = self._client.get_paginator("list_queues")
        for page in paginator.paginate():
            urls.extend(page.get("QueueUrls", []))
        return urls

    def purge(self, queue_url: str) -> dict[str, Any]:
        return self._client.purge_queue(QueueUrl=queue_url)

    def delete_batch(self, queue_url: str, entries: list[dict[str, str]]) -> dict[str, Any]:
        """Delete (ack) messages; entries sharing an ``Id`` are sent once."""
        unique: dict[str, dict[str, str]] = {}
        for entry in entries:
            unique.setdefault(entry["Id"], entry)
        return self._client.delete_message_batch(QueueUrl=queue_url, Entries=list(unique.values()))

    def change_visibility(self, queue_url: str, receipt_handle: str, timeout: int) -> dict[str, Any]:
        return self._client.change_message_visibility(
            QueueUrl=queue_url, ReceiptHandle=receipt_handle, VisibilityTimeout=timeout,
        )
