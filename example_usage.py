#!/usr/bin/env python3
"""
Basic usage examples for the Zadarma API client.

Reads credentials from ZADARMA_KEY / ZADARMA_SECRET (and ZADARMA_SANDBOX
to target the sandbox API). Set LOG_LEVEL=DEBUG to see requests as they
are built and sent.
"""

import asyncio
import logging
import os
import sys
from pathlib import Path

import requests

from zadarma_client import ZadarmaClient, ZadarmaClientError

logger = logging.getLogger("example_usage")


def setup_logging():
    """Configure console logging from LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def show(title, response):
    print(f"{title} [{response.status_code}]")
    print(f"   {response.text}\n")


async def tariff_async(client):
    response = await client.call_async("/v1/tariff/")
    show("Tariff (async)", response)


def upload_sound(client, filename):
    path = Path(filename)
    if not path.exists():
        logger.warning("Skipping upload, %s not found", filename)
        return

    request = client.generate_multipart_request(
        "/v1/pbx/ivr/sounds/upload/",
        {"name": path.name},
        path.read_bytes(),
        "audio/wav",
        "file",
        path.name
    )
    show("IVR sound upload", client.send(request))


def main():
    """Run basic usage examples."""
    setup_logging()

    try:
        client = ZadarmaClient.from_env()
    except ZadarmaClientError as e:
        print(f"Configuration error: {e}")
        print("Set ZADARMA_KEY and ZADARMA_SECRET first.")
        sys.exit(1)

    print(f"=== Zadarma API examples ({client.base_url}) ===\n")

    try:
        with client:
            show("Tariff", client.call("/v1/tariff/"))

            show("Set caller id", client.put(
                "/v1/sip/callerid/", {"number": "71234567890", "id": "123456"}))

            show("Call price", client.get(
                "/v1/info/price/", {"number": "71234567890", "caller_id": "70987654321"}))

            show("Statistics", client.get(
                "/v1/statistics/", {"start": "2020-02-13 10:00:00", "end": "2020-02-24 05:00:00"}))

            asyncio.run(tariff_async(client))

            show("Balance (xml)", client.get("/v1/info/balance/", format="xml"))

            upload_sound(client, "example.wav")
    except ZadarmaClientError as e:
        print(f"Zadarma Client Error: {e}")
        sys.exit(1)
    except requests.RequestException as e:
        print(f"HTTP error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
