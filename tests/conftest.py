"""Shared test doubles for the HTTP layer.

``FakeSession`` stands in for ``requests.Session``: ``get`` serves canned
pages, ``head`` serves canned statuses (200 when unlisted). An outcome that
is an exception instance is raised instead of returned.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Union
from unittest.mock import MagicMock

import requests


Outcome = Union[int, Exception]


def make_response(status: int = 200, content: bytes = b"") -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    resp.content = content
    return resp


class FakeSession:
    def __init__(
        self,
        pages: Dict[str, Union[MagicMock, Exception]] | None = None,
        heads: Dict[str, Outcome] | None = None,
    ) -> None:
        self.pages = pages or {}
        self.heads = heads or {}
        self.get_calls: List[tuple] = []
        self.head_calls: List[tuple] = []
        self.closed = False
        self._lock = threading.Lock()

    def get(self, url: str, **kwargs):
        self.get_calls.append((url, kwargs))
        outcome = self.pages[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def head(self, url: str, **kwargs):
        with self._lock:
            self.head_calls.append((url, kwargs))
        outcome = self.heads.get(url, 200)
        if isinstance(outcome, Exception):
            raise outcome
        return make_response(outcome)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
