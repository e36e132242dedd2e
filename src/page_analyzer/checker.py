"""
Concurrent liveness checks for the links found on a page.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from functools import partial
from typing import Callable, List, Optional, Sequence

import requests

from page_analyzer.fetcher import new_session
from page_analyzer.models import BrokenLinkRecord

LOGGER = logging.getLogger(__name__)

CHECK_TIMEOUT_S = 5.0
MAX_CONCURRENT_CHECKS = 10
BROKEN_STATUS_THRESHOLD = 400

# Takes a URL and returns the observed status code, 0 when nothing came back
Probe = Callable[[str], int]


def head_status(session: requests.Session, url: str) -> int:
    """Issue a single HEAD request, following redirects, and return its status."""
    try:
        resp = session.head(url, timeout=CHECK_TIMEOUT_S, allow_redirects=True)
    except (requests.RequestException, ValueError) as e:
        LOGGER.debug("HEAD %s failed: %s", url, e)
        return 0
    resp.close()
    return resp.status_code


def is_broken(status: int) -> bool:
    return status == 0 or status >= BROKEN_STATUS_THRESHOLD


def check_links(
    urls: Sequence[str],
    session: Optional[requests.Session] = None,
    probe: Optional[Probe] = None,
) -> List[BrokenLinkRecord]:
    """
    Check every URL and return the broken ones.

    At most MAX_CONCURRENT_CHECKS probes run at once; the rest wait for a
    free worker. Returns only after every URL has an outcome. Records come
    back in completion order, which varies between runs.

    Args:
        urls: Resolved absolute links, in document order.
        session: Session used by the default HEAD probe. A private one is
                 opened and closed when omitted.
        probe: Replaces the HEAD request; must return a status code.
    """
    if not urls:
        return []

    if probe is None:
        if session is None:
            with new_session() as own_session:
                return check_links(urls, session=own_session)
        probe = partial(head_status, session)

    broken: List[BrokenLinkRecord] = []
    with ThreadPoolExecutor(
        max_workers=MAX_CONCURRENT_CHECKS, thread_name_prefix="linkcheck"
    ) as pool:
        future_to_url = {pool.submit(probe, url): url for url in urls}
        for future in as_completed(future_to_url):
            url = future_to_url[future]
            try:
                status = future.result()
            except Exception as exc:
                LOGGER.warning("Check of %s raised %r, counting it as broken", url, exc)
                status = 0
            if is_broken(status):
                LOGGER.debug("Broken link %s (status %s)", url, status)
                broken.append(BrokenLinkRecord(link=url, status=status))

    LOGGER.info("Checked %d links, %d broken", len(urls), len(broken))
    return broken
