"""Shared test fixtures."""

from __future__ import annotations

from typing import List, Optional

import pytest


ARROW_RIGHT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" stroke-width="1.5" stroke="currentColor" aria-hidden="true" data-slot="icon">
  <path stroke-linecap="round" stroke-linejoin="round" d="M13.5 4.5 21 12m0 0-7.5 7.5M21 12H3"/>
</svg>'''

TWO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24">
  <path d="M1 2"/>
  <path d="M3 4" stroke="red"/>
</svg>'''

NO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

UNTERMINATED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M1 2">
</svg>'''

DEFAULTS = (
    'stroke="url(#paint1_linear_0_1)" stroke-linejoin="round" stroke-linecap="round" '
    'stroke-width="1" transform="matrix(25 0 0 25 25 0) translate(22, 0)"'
)


class StubFetcher:
    """Fetcher double that returns a canned body or raises a canned error."""

    def __init__(self, body: str = "", error: Optional[BaseException] = None):
        self.body = body
        self.error = error
        self.urls: List[str] = []

    async def get(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def arrow_right_fetcher() -> StubFetcher:
    return StubFetcher(ARROW_RIGHT_SVG)
