"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import logging

from extsqs.core.config import AppSettings, AWSClientConfig, ExtendedConfig, S3Config
from extsqs.core.logging import configure_logging


def test_default_settings():
    settings = AppSettings()
    assert settings.log_level == "INFO"
    assert settings.s3.bucket is None
    assert settings.sqs.default_visibility_timeout == 300
    assert settings.sqs.long_polling_wait_time == 20


def test_extended_config_defaults():
    config = ExtendedConfig()
    assert config.max_message_size == 262_085
    assert config.max_uncompressed_size == 65_486
    assert config.shards == 50


def test_env_override(monkeypatch):
    monkeypatch.setenv("EXTSQS_S3_BUCKET", "from-env")
    monkeypatch.setenv("EXTSQS_EXTENDED_SHARDS", "8")
    settings = AppSettings(s3=S3Config(), extended=ExtendedConfig())
    assert settings.s3.bucket == "from-env"
    assert settings.extended.shards == 8


class TestBotoKwargs:
    def test_minimal(self):
        kwargs = AWSClientConfig(region="eu-west-1").boto_kwargs()
        assert kwargs["region_name"] == "eu-west-1"
        assert "endpoint_url" not in kwargs
        assert kwargs["config"].max_pool_connections == 50
        assert kwargs["config"].proxies is None

    def test_proxy_applied_only_when_not_bypassed(self):
        bypassed = AWSClientConfig(proxy="http://proxy:3128").boto_kwargs()
        assert bypassed["config"].proxies is None

        proxied = AWSClientConfig(proxy="http://proxy:3128", bypass_proxy=False).boto_kwargs()
        assert proxied["config"].proxies == {"http": "http://proxy:3128", "https": "http://proxy:3128"}

    def test_overrides_win(self):
        config = AWSClientConfig(endpoint_url="http://global", connect_timeout=1, read_timeout=2,
                                 max_retries=4, access_key_id="AK", secret_access_key="SK")
        kwargs = config.boto_kwargs(endpoint_url="http://local", read_timeout=9)
        assert kwargs["endpoint_url"] == "http://local"
        assert kwargs["config"].connect_timeout == 1
        assert kwargs["config"].read_timeout == 9
        assert kwargs["config"].retries == {"max_attempts": 4}
        assert kwargs["aws_access_key_id"] == "AK"
        assert kwargs["aws_secret_access_key"] == "SK"

    def test_independent_instances(self):
        east = AWSClientConfig(region="us-east-1").boto_kwargs()
        west = AWSClientConfig(region="us-west-2").boto_kwargs()
        assert east["region_name"] != west["region_name"]


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("WARNING")
    assert logger.name == "extsqs"
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
