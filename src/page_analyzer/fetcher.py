"""
HTTP retrieval of the page under analysis.
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from page_analyzer.errors import FetchError

LOGGER = logging.getLogger(__name__)

FETCH_TIMEOUT_S = 15.0
USER_AGENT = "PageAnalyzer/1.0"


def new_session() -> requests.Session:
    """Create a session carrying the analyzer's User-Agent."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def fetch(target_url: str, session: Optional[requests.Session] = None) -> bytes:
    """
    GET the target and return the raw body.

    The response status is deliberately ignored: error pages are still
    documents and get analyzed like any other body.

    Raises:
        FetchError: on connection failure, timeout or a URL the client rejects.
    """
    if session is None:
        with new_session() as own_session:
            return _get_body(own_session, target_url)
    return _get_body(session, target_url)


def _get_body(session: requests.Session, target_url: str) -> bytes:
    try:
        resp = session.get(target_url, timeout=FETCH_TIMEOUT_S, allow_redirects=True)
    except (requests.RequestException, ValueError) as e:
        raise FetchError(target_url, f"could not fetch page: {e}") from e

    try:
        body = resp.content
    except requests.RequestException as e:
        raise FetchError(target_url, f"could not read response body: {e}") from e
    finally:
        resp.close()

    LOGGER.info("Fetched %s (HTTP %s, %d bytes)", target_url, resp.status_code, len(body))
    return body
