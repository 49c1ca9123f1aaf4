"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Any

from botocore.config import Config
from pydantic_settings import BaseSettings


class AWSClientConfig(BaseSettings):
    """Shared boto3 client configuration (credentials, region, proxy, timeouts)."""

    model_config = {"env_prefix": "EXTSQS_AWS_"}

    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    access_key_id: str | None = None
    secret_access_key: str | None = None
    proxy: str | None = None
    bypass_proxy: bool = True
    max_retries: int | None = None
    connect_timeout: float | None = None
    read_timeout: float | None = None
    max_pool_connections: int = 50

    def boto_kwargs(self, endpoint_url: str | None = None,
                    connect_timeout: float | None = None,
                    read_timeout: float | None = None) -> dict[str, Any]:
        """Keyword arguments for ``boto3.client``; per-service overrides win."""
        options: dict[str, Any] = {"max_pool_connections": self.max_pool_connections}
        if self.proxy and not self.bypass_proxy:
            options["proxies"] = {"http": self.proxy, "https": self.proxy}
        if self.max_retries is not None:
            options["retries"] = {"max_attempts": self.max_retries}
        connect = connect_timeout if connect_timeout is not None else self.connect_timeout
        if connect is not None:
            options["connect_timeout"] = connect
        read = read_timeout if read_timeout is not None else self.read_timeout
        if read is not None:
            options["read_timeout"] = read

        kwargs: dict[str, Any] = {"region_name": self.region, "config": Config(**options)}
        endpoint = endpoint_url or self.endpoint_url
        if endpoint:
            kwargs["endpoint_url"] = endpoint
        if self.access_key_id and self.secret_access_key:
            kwargs["aws_access_key_id"] = self.access_key_id
            kwargs["aws_secret_access_key"] = self.secret_access_key
        return kwargs


class SQSConfig(BaseSettings):
    """SQS queue configuration."""

    model_config = {"env_prefix": "EXTSQS_SQS_"}

    account: str = ""
    queue_prefix: str = ""
    queue_suffix: str = ""
    endpoint_url: str | None = None  # LocalStack override
    default_visibility_timeout: int = 300
    long_polling_wait_time: int = 20
    timeout: float | None = None
    connect_timeout: float | None = None


class S3Config(BaseSettings):
    """S3 overflow storage configuration."""

    model_config = {"env_prefix": "EXTSQS_S3_"}

    bucket: str | None = None  # default overflow bucket
    endpoint_url: str | None = None  # LocalStack override


class ExtendedConfig(BaseSettings):
    """Size thresholds and fan-out for extended messages."""

    model_config = {"env_prefix": "EXTSQS_EXTENDED_"}

    # 256 KiB (262,144 bytes) less headroom for SQS's own size accounting
    max_message_size: int = 262_085
    # 64 KiB (65,536 bytes) less 50 bytes of gzip framing at level 0
    max_uncompressed_size: int = 65_486
    shards: int = 50
    max_workers: int = 10


class AthenaConfig(BaseSettings):
    """Athena query client configuration."""

    model_config = {"env_prefix": "EXTSQS_ATHENA_"}

    database: str = ""
    output_bucket: str = ""
    poll_interval: float = 3.0
    max_wait: float | None = None


class SNSConfig(BaseSettings):
    """SNS publisher configuration."""

    model_config = {"env_prefix": "EXTSQS_SNS_"}

    account: str = ""
    arn_prefix: str = "sns-"
    arn_suffix: str = ""
    default_subject: str | None = None


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "EXTSQS_"}

    log_level: str = "INFO"

    aws: AWSClientConfig = AWSClientConfig()
    sqs: SQSConfig = SQSConfig()
    s3: S3Config = S3Config()
    extended: ExtendedConfig = ExtendedConfig()
    athena: AthenaConfig = AthenaConfig()
    sns: SNSConfig = SNSConfig()
