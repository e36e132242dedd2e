"""
Fatal error taxonomy for a single page analysis.
"""
from __future__ import annotations


class AnalysisError(Exception):
    """Base class for errors that abort an analysis without producing a result."""
    stage = "analysis"

    def __init__(self, url: str, message: str) -> None:
        super().__init__(url, message)
        self.url = url
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} ({self.url})"


class FetchError(AnalysisError):
    """The initial GET could not complete."""
    stage = "fetch"


class ParseError(AnalysisError):
    """The fetched bytes could not be parsed as a document."""
    stage = "parse"


class URLError(AnalysisError):
    """The target URL is not a usable base for link resolution."""
    stage = "url"
