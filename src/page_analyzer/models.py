"""
Result data structures produced by the analysis pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class HTMLVersion(str, Enum):
    HTML5 = "HTML5"
    HTML401_STRICT = "HTML 4.01 Strict"
    HTML401_TRANSITIONAL = "HTML 4.01 Transitional"
    UNKNOWN = "Unknown"


class LinkKind(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


@dataclass(frozen=True, slots=True)
class HeadingCounts:
    """Number of h1..h6 elements in a document."""
    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0
    h5: int = 0
    h6: int = 0

    def __getitem__(self, level: int) -> int:
        if not 1 <= level <= 6:
            raise IndexError(f"heading level out of range: {level}")
        return getattr(self, f"h{level}")

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (self.h1, self.h2, self.h3, self.h4, self.h5, self.h6)


@dataclass(frozen=True, slots=True)
class BrokenLinkRecord:
    """A link that failed its liveness check; status is 0 when no response arrived."""
    link: str
    status: int


@dataclass(frozen=True, slots=True)
class CandidateLink:
    """Resolved anchor target queued for a liveness check."""
    href: str
    url: str
    kind: LinkKind


@dataclass(frozen=True, slots=True)
class CrawlResult:
    """Everything learned about one page in one analysis run."""
    html_version: HTMLVersion
    title: str
    heading_counts: HeadingCounts
    internal_link_count: int
    external_link_count: int
    has_login_form: bool
    broken_links: Tuple[BrokenLinkRecord, ...] = ()

    @property
    def broken_link_count(self) -> int:
        return len(self.broken_links)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into the record shape stored per analysis job."""
        record: Dict[str, Any] = {
            "html_version": self.html_version.value,
            "title": self.title,
        }
        for level, count in enumerate(self.heading_counts.as_tuple(), start=1):
            record[f"h{level}_count"] = count
        record.update(
            internal_links=self.internal_link_count,
            external_links=self.external_link_count,
            broken_links=self.broken_link_count,
            has_login_form=self.has_login_form,
            broken_link_details=[
                {"link": b.link, "status": b.status} for b in self.broken_links
            ],
        )
        return record
