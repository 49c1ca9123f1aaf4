"""Athena query client."""

from __future__ import annotations

from extsqs.analytics.athena import AthenaQueryClient
from extsqs.core.config import AppSettings


def create_query_client(settings: AppSettings | None = None) -> AthenaQueryClient:
    """Create an Athena client from application settings."""
    if settings is None:
        settings = AppSettings()
    return AthenaQueryClient(
        settings.athena.database,
        settings.athena.output_bucket,
        poll_interval=settings.athena.poll_interval,
        max_wait=settings.athena.max_wait,
        aws=settings.aws,
    )


__all__ = ["AthenaQueryClient", "create_query_client"]
