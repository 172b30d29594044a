"""
Integration tests against the Zadarma sandbox API.

Skipped unless ZADARMA_KEY and ZADARMA_SECRET are set.
"""

import asyncio
import os

import pytest

from zadarma_client import ZadarmaClient


pytestmark = pytest.mark.skipif(
    not (os.getenv("ZADARMA_KEY") and os.getenv("ZADARMA_SECRET")),
    reason="ZADARMA_KEY and ZADARMA_SECRET are required for sandbox tests"
)


class TestIntegration:
    """Integration tests with the sandbox API."""

    @pytest.fixture
    def client(self):
        """Create authenticated sandbox client."""
        with ZadarmaClient(os.environ["ZADARMA_KEY"], os.environ["ZADARMA_SECRET"], sandbox=True) as client:
            yield client

    def test_balance_json(self, client):
        response = client.get("/v1/info/balance/")

        assert response.status_code == 200
        assert response.json()["status"] == "success"

    def test_balance_xml(self, client):
        response = client.get("/v1/info/balance/", format="xml")

        assert response.status_code == 200
        assert response.content.lstrip().startswith(b"<")

    def test_tariff_async(self, client):
        response = asyncio.run(client.call_async("/v1/tariff/"))

        assert response.status_code == 200

    def test_wrong_secret_rejected(self):
        with ZadarmaClient(os.environ["ZADARMA_KEY"], "wrong-secret", sandbox=True) as client:
            response = client.get("/v1/info/balance/")

        assert response.status_code != 200
