"""SNS publisher addressing topics by name."""

from __future__ import annotations

from typing import Any

import boto3

from extsqs.core.config import AWSClientConfig
from extsqs.core.exceptions import ConfigurationError
from extsqs.messaging.sender import stringify


class SNSPublisher:
    """Publishes messages to ``{arn_prefix}{name}{arn_suffix}`` topics in one account."""

    def __init__(self, account: str, *, arn_prefix: str = "sns-", arn_suffix: str = "",
                 default_subject: str | None = None,
                 aws: AWSClientConfig | None = None) -> None:
        if not account:
            raise ConfigurationError("SNS account id required to build topic ARNs")
        self._account = account
        self._arn_prefix = arn_prefix
        self._arn_suffix = arn_suffix
        self._default_subject = default_subject
        self._aws = aws or AWSClientConfig()
        self._client = boto3.client("sns", **self._aws.boto_kwargs())

    def topic_arn(self, topic_name: str) -> str:
        return (
            f"arn:aws:sns:{self._aws.region}:{self._account}:"
            f"{self._arn_prefix}{topic_name}{self._arn_suffix}"
        )

    def publish(self, message: Any, topic_name: str, subject: str | None = None,
                message_attributes: dict[str, Any] | None = None) -> dict[str, Any]:
        params: dict[str, Any] = {
            "TopicArn": self.topic_arn(topic_name),
            "Message": stringify(message),
        }
        subject = subject or self._default_subject
        if subject:
            params["Subject"] = subject
        if message_attributes:
            params["MessageAttributes"] = message_attributes
        return self._client.publish(**params)
