"""Tests for doctype-based HTML version detection."""

from __future__ import annotations

from page_analyzer.models import HTMLVersion
from page_analyzer.version import VERSION_PREFIX_BYTES, VersionDetector


_STRICT = b'<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" "http://www.w3.org/TR/html4/strict.dtd">'
_TRANSITIONAL = (
    b'<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
    b'"http://www.w3.org/TR/html4/loose.dtd">'
)


class TestVersionDetector:
    def test_html5_lowercase(self) -> None:
        assert VersionDetector().detect(b"<!doctype html><html></html>") is HTMLVersion.HTML5

    def test_html5_is_case_insensitive(self) -> None:
        detector = VersionDetector()
        assert detector.detect(b"<!DOCTYPE HTML>") == detector.detect(b"<!doctype html>")
        assert detector.detect(b"<!DOCTYPE HTML>") is HTMLVersion.HTML5

    def test_html4_strict(self) -> None:
        assert VersionDetector().detect(_STRICT + b"<html></html>") is HTMLVersion.HTML401_STRICT

    def test_html4_transitional(self) -> None:
        result = VersionDetector().detect(_TRANSITIONAL + b"<html></html>")
        assert result is HTMLVersion.HTML401_TRANSITIONAL

    def test_no_doctype_is_unknown(self) -> None:
        assert VersionDetector().detect(b"<html><head></head></html>") is HTMLVersion.UNKNOWN

    def test_xhtml_doctype_is_unknown(self) -> None:
        xhtml = b'<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN">'
        assert VersionDetector().detect(xhtml) is HTMLVersion.UNKNOWN

    def test_empty_body_is_unknown(self) -> None:
        assert VersionDetector().detect(b"") is HTMLVersion.UNKNOWN

    def test_doctype_past_prefix_is_ignored(self) -> None:
        body = b" " * VERSION_PREFIX_BYTES + b"<!doctype html>"
        assert VersionDetector().detect(body) is HTMLVersion.UNKNOWN

    def test_doctype_ending_exactly_at_prefix_boundary(self) -> None:
        doctype = b"<!doctype html>"
        body = b" " * (VERSION_PREFIX_BYTES - len(doctype)) + doctype + b"<html>"
        assert VersionDetector().detect(body) is HTMLVersion.HTML5

    def test_detection_is_repeatable(self) -> None:
        detector = VersionDetector()
        first = detector.detect(_STRICT)
        assert all(detector.detect(_STRICT) is first for _ in range(5))

    def test_version_value_is_plain_string(self) -> None:
        assert HTMLVersion.HTML401_STRICT.value == "HTML 4.01 Strict"
        assert HTMLVersion.HTML5 == "HTML5"
