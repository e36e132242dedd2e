"""
The single-page analysis pipeline.

fetch -> detect version -> summarize document -> extract links, then a
concurrent liveness check of every link, merged into one CrawlResult.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import requests

from page_analyzer.checker import check_links
from page_analyzer.document import DocumentSummary, parse_document, summarize_document
from page_analyzer.fetcher import fetch, new_session
from page_analyzer.links import LinkScan, extract_links
from page_analyzer.models import BrokenLinkRecord, CrawlResult, HTMLVersion
from page_analyzer.version import VersionDetector

LOGGER = logging.getLogger(__name__)


def build_result(
    version: HTMLVersion,
    summary: DocumentSummary,
    scan: LinkScan,
    broken: Sequence[BrokenLinkRecord],
) -> CrawlResult:
    """Merge the stage outputs into the final result."""
    return CrawlResult(
        html_version=version,
        title=summary.title,
        heading_counts=summary.heading_counts,
        internal_link_count=scan.internal_count,
        external_link_count=scan.external_count,
        has_login_form=summary.has_login_form,
        broken_links=tuple(broken),
    )


class PageAnalyzer:
    """
    Runs the analysis pipeline for one URL at a time.

    A session passed in is used for both the page fetch and the link checks
    and is left open; otherwise every run opens and closes its own.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session
        self._detector = VersionDetector()

    def analyze(self, target_url: str) -> CrawlResult:
        """
        Analyze one page.

        Raises:
            FetchError: the page could not be retrieved.
            ParseError: the body could not be parsed.
            URLError: the target is not a valid base for its links.
        """
        if self._session is not None:
            return self._run(target_url, self._session)
        with new_session() as session:
            return self._run(target_url, session)

    def _run(self, target_url: str, session: requests.Session) -> CrawlResult:
        LOGGER.info("Analyzing %s", target_url)
        body = fetch(target_url, session=session)

        version = self._detector.detect(body)
        soup = parse_document(body, url=target_url)
        summary = summarize_document(soup)
        scan = extract_links(soup, target_url)
        LOGGER.debug(
            "%s: version=%s title=%r headings=%s login_form=%s",
            target_url, version.value, summary.title,
            summary.heading_counts.as_tuple(), summary.has_login_form,
        )

        broken = check_links(scan.urls, session=session)
        result = build_result(version, summary, scan, broken)
        LOGGER.info(
            "Finished %s: %d internal, %d external, %d broken",
            target_url, result.internal_link_count,
            result.external_link_count, result.broken_link_count,
        )
        return result


def analyze(target_url: str) -> CrawlResult:
    """Analyze one page with a fresh analyzer and its own connections."""
    return PageAnalyzer().analyze(target_url)
