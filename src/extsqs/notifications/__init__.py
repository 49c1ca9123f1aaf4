"""SNS topic publishing."""

from __future__ import annotations

from extsqs.core.config import AppSettings
from extsqs.notifications.sns import SNSPublisher


def create_publisher(settings: AppSettings | None = None) -> SNSPublisher:
    """Create an SNS publisher from application settings."""
    if settings is None:
        settings = AppSettings()
    return SNSPublisher(
        settings.sns.account,
        arn_prefix=settings.sns.arn_prefix,
        arn_suffix=settings.sns.arn_suffix,
        default_subject=settings.sns.default_subject,
        aws=settings.aws,
    )


__all__ = ["SNSPublisher", "create_publisher"]
