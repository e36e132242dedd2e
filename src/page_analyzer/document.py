"""
Parsing and structural metrics of the fetched document.
"""
from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from page_analyzer.errors import ParseError
from page_analyzer.models import HeadingCounts

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


@dataclass(frozen=True, slots=True)
class DocumentSummary:
    title: str
    heading_counts: HeadingCounts
    has_login_form: bool


def parse_document(body: bytes, url: str = "") -> BeautifulSoup:
    """Parse the full response body into a navigable tree."""
    try:
        return BeautifulSoup(body, "lxml")
    except ParserRejectedMarkup as e:
        raise ParseError(url, f"could not parse document: {e}") from e


def extract_title(soup: BeautifulSoup) -> str:
    """Return the trimmed text of the first <title>, or an empty string."""
    title = soup.find("title")
    if title is None:
        return ""
    return title.get_text().strip()


def count_headings(soup: BeautifulSoup) -> HeadingCounts:
    """Count every h1..h6 element; nested headings count for their own tag."""
    return HeadingCounts(*(len(soup.find_all(tag)) for tag in HEADING_TAGS))


def has_login_form(soup: BeautifulSoup) -> bool:
    """
    Check whether any form holds a password input.

    Forms are scanned in document order and the scan ends at the first match.
    """
    for form in soup.find_all("form"):
        if form.find("input", attrs={"type": "password"}) is not None:
            return True
    return False


def summarize_document(soup: BeautifulSoup) -> DocumentSummary:
    return DocumentSummary(
        title=extract_title(soup),
        heading_counts=count_headings(soup),
        has_login_form=has_login_form(soup),
    )
