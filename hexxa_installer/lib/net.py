from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "hexxa-xcode-theme/1.0"


def fetch_bytes(url: str) -> bytes:
    """Single blocking GET; the body is returned as opaque bytes.

    Raises requests.RequestException on transport errors and non-2xx status.
    """

    logger.info("GET %s", url)
    response = requests.get(url, headers={"User-Agent": USER_AGENT}, allow_redirects=True)
    response.raise_for_status()
    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.content
