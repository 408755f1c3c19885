"""Reachability helpers for the smoke and E2E suites."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


def is_app_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the application root responds with a non-error status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 400


def wait_for_app_reachable(url: str, timeout: int = 30, interval: int = 1) -> None:
    """
    Poll the application root until it answers or timeout.

    Raises:
        RuntimeError: When the application never answered within ``timeout``.
    """
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_reachable(url):
            logger.info("Application at %s is reachable", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"Application at {url} not reachable after {timeout}s")
