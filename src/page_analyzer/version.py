"""
Doctype-based HTML version classification.
"""
from __future__ import annotations

import re

from page_analyzer.models import HTMLVersion

# Only this many leading bytes are inspected; later doctypes go undetected.
VERSION_PREFIX_BYTES = 1024

HTML5_DOCTYPE = b"<!doctype html>"


class VersionDetector:
    """Classify a document by the doctype found in its leading bytes."""

    def __init__(self) -> None:
        self._html4_strict = re.compile(
            re.escape(b'<!doctype html public "-//w3c//dtd html 4.01//en"')
        )
        self._html4_transitional = re.compile(
            re.escape(b'<!doctype html public "-//w3c//dtd html 4.01 transitional//en"')
        )

    def detect(self, body: bytes) -> HTMLVersion:
        prefix = body[:VERSION_PREFIX_BYTES].lower()
        if HTML5_DOCTYPE in prefix:
            return HTMLVersion.HTML5
        if self._html4_strict.search(prefix):
            return HTMLVersion.HTML401_STRICT
        if self._html4_transitional.search(prefix):
            return HTMLVersion.HTML401_TRANSITIONAL
        return HTMLVersion.UNKNOWN
