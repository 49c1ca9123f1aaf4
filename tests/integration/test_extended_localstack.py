"""Integration tests for the extended queue client against LocalStack."""

from __future__ import annotations

import base64
import os

import pytest

from extsqs.client import create_client
from tests.integration.conftest import skip_no_localstack


@skip_no_localstack
class TestExtendedIntegration:
    @pytest.fixture
    def client(self, localstack_settings, localstack_names):
        client = create_client(localstack_settings)
        client.purge(localstack_names[0])
        return client

    def test_inline_round_trip(self, client, localstack_names):
        queue, _ = localstack_names
        assert client.extended_send(queue, {"hello": "world"}).extended is False
        [resolution] = client.extended_retrieve(queue)
        assert resolution.body == {"hello": "world"}

    def test_overflow_round_trip(self, client, localstack_names):
        queue, _ = localstack_names
        payload = {"noise": base64.b64encode(os.urandom(300_000)).decode()}
        assert client.extended_send(queue, payload).extended is True
        [resolution] = client.extended_retrieve(queue)
        assert resolution.body == payload
