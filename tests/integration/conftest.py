"""Integration test fixtures — LocalStack SQS and S3."""

from __future__ import annotations

import os
import uuid

import boto3
import pytest

from extsqs.core.config import AppSettings, AWSClientConfig, S3Config, SQSConfig

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
LOCALSTACK_ACCOUNT = "000000000000"
REGION = "us-east-1"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client("sqs", region_name=REGION, endpoint_url=LOCALSTACK_URL)
        client.list_queues()
        return True
    except Exception:
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture(scope="session")
def localstack_names():
    """Create a uniquely named queue and bucket on LocalStack."""
    suffix = uuid.uuid4().hex[:8]
    queue, bucket = f"extsqs-inttest-{suffix}", f"extsqs-inttest-{suffix}"
    boto3.client("sqs", region_name=REGION, endpoint_url=LOCALSTACK_URL).create_queue(QueueName=queue)
    boto3.client("s3", region_name=REGION, endpoint_url=LOCALSTACK_URL).create_bucket(Bucket=bucket)
    return queue, bucket


@pytest.fixture(scope="session")
def localstack_settings(localstack_names):
    _, bucket = localstack_names
    return AppSettings(
        aws=AWSClientConfig(region=REGION, endpoint_url=LOCALSTACK_URL),
        sqs=SQSConfig(account=LOCALSTACK_ACCOUNT, endpoint_url=LOCALSTACK_URL, long_polling_wait_time=1),
        s3=S3Config(bucket=bucket),
    )
