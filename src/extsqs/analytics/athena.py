"""Athena query client: start a query, wait for it, and return typed rows."""

from __future__ import annotations

import logging
import time
from typing import Any

import boto3

from extsqs.core.config import AWSClientConfig
from extsqs.core.exceptions import QueryFailedError, QueryTimeoutError, UnsupportedColumnTypeError

logger = logging.getLogger(__name__)

SUCCEEDED = "SUCCEEDED"
FAILED_STATES = frozenset({"FAILED", "CANCELLED"})
INTEGER_TYPES = frozenset({"integer", "bigint", "smallint", "tinyint"})


def convert_value(value: str | None, column_type: str) -> Any:
    """Convert an Athena VarCharValue to the column's Python type."""
    if value is None:
        return None
    if column_type == "boolean":
        return value == "true"
    if column_type == "varchar":
        return value
    if column_type in INTEGER_TYPES:
        return int(value)
    raise UnsupportedColumnTypeError(f"Type {column_type!r} is not supported")


def format_rows(rows: list[dict[str, Any]], column_info: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Map result rows to dicts keyed by column name."""
    formatted = []
    for row in rows:
        formatted.append({
            column["Name"]: convert_value(datum.get("VarCharValue"), column["Type"])
            for datum, column in zip(row.get("Data", []), column_info)
        })
    return formatted


class AthenaQueryClient:
    """Runs SQL against one Athena database, writing results to an S3 bucket."""

    def __init__(self, database: str, output_bucket: str, *, poll_interval: float = 3.0,
                 max_wait: float | None = None, aws: AWSClientConfig | None = None,
                 client: Any = None) -> None:
        self._database = database
        self._output_bucket = output_bucket
        self._poll_interval = poll_interval
        self._max_wait = max_wait
        self._client = client or boto3.client("athena", **(aws or AWSClientConfig()).boto_kwargs())

    def start_query(self, sql: str) -> str:
        resp = self._client.start_query_execution(
            QueryString=sql,
            QueryExecutionContext={"Database": self._database},
            ResultConfiguration={"OutputLocation": f"s3://{self._output_bucket}"},
        )
        return resp["QueryExecutionId"]

    def wait_for(self, execution_id: str) -> str:
        """Poll until the execution reaches a terminal state."""
        started = time.monotonic()
        while True:
            resp = self._client.get_query_execution(QueryExecutionId=execution_id)
            status = resp["QueryExecution"]["Status"]
            state = status["State"]
            if state == SUCCEEDED:
                return execution_id
            if state in FAILED_STATES:
                raise QueryFailedError(execution_id, state, status.get("StateChangeReason"))

            elapsed = time.monotonic() - started
            if self._max_wait is not None and elapsed + self._poll_interval > self._max_wait:
                raise QueryTimeoutError(
                    f"Query {execution_id} still {state} after {elapsed:.1f}s"
                )
            logger.debug("Query %s is %s; polling again in %ss", execution_id, state, self._poll_interval)
            time.sleep(self._poll_interval)

    def get_results(self, execution_id: str) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        column_info: list[dict[str, Any]] = []
        paginator = self._client.get_paginator("get_query_results")
        for page_number, page in enumerate(paginator.paginate(QueryExecutionId=execution_id)):
            result_set = page["ResultSet"]
            if not column_info:
                column_info = result_set["ResultSetMetadata"]["ColumnInfo"]
            page_rows = result_set.get("Rows", [])
            # The first row of the first page holds the column names.
            rows.extend(page_rows[1:] if page_number == 0 else page_rows)
        return format_rows(rows, column_info)

    def query(self, sql: str) -> list[dict[str, Any]]:
        execution_id = self.start_query(sql)
        self.wait_for(execution_id)
        return self.get_results(execution_id)
