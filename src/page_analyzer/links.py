"""
Anchor extraction and internal/external classification.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import SplitResult, urljoin, urlsplit

from bs4 import BeautifulSoup

from page_analyzer.errors import URLError
from page_analyzer.models import CandidateLink, LinkKind

LOGGER = logging.getLogger(__name__)

# Case-sensitive; these hrefs never count as links
IGNORED_PREFIXES: Tuple[str, ...] = ("mailto:", "javascript:")

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# ASCII characters a hostname may not contain; non-ASCII (IDN) hosts pass
_BAD_HOST_CHAR = re.compile(r"[^A-Za-z0-9\-._~!$&'()*+,;=:\u0080-\U0010FFFF]")


@dataclass(slots=True)
class LinkScan:
    """Outcome of scanning a document's anchors."""
    candidates: List[CandidateLink] = field(default_factory=list)
    internal_count: int = 0
    external_count: int = 0
    discarded_count: int = 0

    @property
    def urls(self) -> List[str]:
        return [c.url for c in self.candidates]


def raw_hostname(parts: SplitResult) -> str:
    """
    Hostname exactly as written in the URL.

    Unlike SplitResult.hostname this keeps the original case.
    """
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else host[1:]
    return host.partition(":")[0]


def parse_base_url(base_url: str) -> SplitResult:
    """Validate that the target can serve as a base for relative links."""
    try:
        parts = urlsplit(base_url)
        parts.port  # raises on a malformed port
    except ValueError as e:
        raise URLError(base_url, f"invalid base URL: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise URLError(base_url, "base URL must be absolute")
    return parts


def resolve_href(href: str, base_url: str) -> Optional[Tuple[str, SplitResult]]:
    """
    Resolve an href against the base, or return None if it is malformed.

    Spaces left in the resolved URL are percent-encoded so the result is a
    clean absolute URL.
    """
    if _CONTROL_CHARS.search(href):
        return None
    try:
        ref = urlsplit(href)
        if not ref.scheme and not href.startswith("/") and ":" in ref.path.partition("/")[0]:
            # "1a:b" would otherwise be read as a relative path
            return None
        absolute = urljoin(base_url, href)
        parts = urlsplit(absolute)
        parts.port
    except ValueError:
        return None
    if _BAD_HOST_CHAR.search(raw_hostname(parts)):
        return None
    if _BAD_ESCAPE.search(parts.path) or _BAD_ESCAPE.search(parts.fragment):
        return None
    return absolute.replace(" ", "%20"), parts


def extract_links(soup: BeautifulSoup, base_url: str) -> LinkScan:
    """
    Enumerate href-bearing anchors in document order and classify each one.

    A link is internal when its hostname is byte-for-byte equal to the base
    hostname. Ignored schemes and unresolvable hrefs are only tallied in
    discarded_count.
    """
    base_host = raw_hostname(parse_base_url(base_url))
    scan = LinkScan()

    for anchor in soup.find_all("a", href=True):
        href = anchor["href"]
        if href.startswith(IGNORED_PREFIXES):
            scan.discarded_count += 1
            continue

        resolved = resolve_href(href, base_url)
        if resolved is None:
            LOGGER.debug("Discarding unresolvable href %r", href)
            scan.discarded_count += 1
            continue

        absolute, parts = resolved
        if raw_hostname(parts) == base_host:
            kind = LinkKind.INTERNAL
            scan.internal_count += 1
        else:
            kind = LinkKind.EXTERNAL
            scan.external_count += 1
        scan.candidates.append(CandidateLink(href=href, url=absolute, kind=kind))

    LOGGER.info(
        "Found %d internal and %d external links (%d discarded)",
        scan.internal_count, scan.external_count, scan.discarded_count,
    )
    return scan
