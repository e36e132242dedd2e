"""
Single-page analyzer: HTML version, headings, login-form detection and
broken-link checking for one URL.
"""
from page_analyzer.core import PageAnalyzer, analyze
from page_analyzer.errors import AnalysisError, FetchError, ParseError, URLError
from page_analyzer.models import BrokenLinkRecord, CrawlResult, HeadingCounts, HTMLVersion

__version__ = "1.0.0"
__all__ = [
    "analyze",
    "PageAnalyzer",
    "CrawlResult",
    "BrokenLinkRecord",
    "HeadingCounts",
    "HTMLVersion",
    "AnalysisError",
    "FetchError",
    "ParseError",
    "URLError",
]
