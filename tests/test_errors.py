"""Tests for the fatal error types."""

from __future__ import annotations

import pickle

import pytest

from page_analyzer.errors import AnalysisError, FetchError, ParseError, URLError


class TestAnalysisError:
    @pytest.mark.parametrize("cls", [FetchError, ParseError, URLError])
    def test_survives_pickling(self, cls) -> None:
        error = cls("https://example.com/", "could not fetch page: refused")
        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is cls
        assert restored.url == "https://example.com/"
        assert restored.message == "could not fetch page: refused"
        assert restored.stage == error.stage
        assert str(restored) == str(error)

    def test_str_names_message_and_url(self) -> None:
        error = FetchError("https://down.example/", "timed out")
        assert str(error) == "timed out (https://down.example/)"
        assert isinstance(error, AnalysisError)
