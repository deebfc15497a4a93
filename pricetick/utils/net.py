# pricetick/utils/net.py
# -*- coding: utf-8 -*-
"""
Network utilities:
- get_json: fetch a JSON quote with sane headers + cache-busting query
- extract_amount: pick a numeric field out of a decoded payload by dotted path
"""

from __future__ import annotations
import logging
import time
from typing import Any, Dict, Optional

import requests

from pricetick.config.constants import TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def _default_headers() -> Dict[str, str]:
    """Build a default header set for JSON quote endpoints."""
    return {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


def get_json(url: str, timeout: Optional[int] = None, extra_headers: Optional[Dict[str, str]] = None) -> Optional[Any]:
    """Fetch a URL and return its decoded JSON body.
    - Adds a cache-busting query param (_ts=current epoch seconds).
    - Returns None on network, HTTP or decoding errors (logged).
    """
    ts = int(time.time())
    sep = "&" if ("?" in url) else "?"
    full_url = f"{url}{sep}_ts={ts}"
    headers = {**_default_headers(), **(extra_headers or {})}
    try:
        response = requests.get(full_url, headers=headers, timeout=timeout or TIMEOUT)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        logger.warning("Network error fetching %s: %s", url, e)
        return None
    except ValueError as e:
        logger.warning("Invalid JSON from %s: %s", url, e)
        return None


def extract_amount(payload: Any, path: str) -> Optional[Any]:
    """Walk a dotted path ('data.amount') through nested dicts; None if any step is missing."""
    node = payload
    for part in (path or "").split("."):
        if not part:
            continue
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node
