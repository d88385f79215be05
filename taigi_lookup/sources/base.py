"""Shared plumbing for dictionary source adapters."""
from __future__ import annotations

import asyncio
import logging
from typing import List
from urllib.parse import quote

import aiohttp
import soupsieve
from bs4 import BeautifulSoup

from ..config import SourceSettings

logger = logging.getLogger(__name__)


class SourceFailure(RuntimeError):
    """Raised when a source cannot be searched; the message is user-facing."""


class FetchFailure(SourceFailure):
    """The HTTP request itself failed."""


class ReadFailure(SourceFailure):
    """The connection succeeded but the body could not be read."""


class ParseFailure(SourceFailure):
    """A selector did not compile or the body was not valid JSON."""


class SourceAdapter:
    """Fetches one dictionary site and flattens its answer into display lines."""

    def __init__(self, settings: SourceSettings) -> None:
        self.settings = settings

    @property
    def name(self) -> str:
        return self.settings.name

    @property
    def icon(self) -> str:
        return self.settings.icon

    @property
    def max_results(self) -> int:
        return self.settings.max_results

    def build_url(self, keyword: str) -> str:
        return self.settings.search_url.format(keyword=quote(keyword, safe=""))

    def resolve_url(self, href: str) -> str:
        """Turn an href found on the site into an absolute URL."""

        if href.startswith("http"):
            return href
        if href.startswith("/"):
            return f"{self.settings.site_root}{href}"
        return f"{self.settings.site_root}/{href}"

    async def fetch_text(self, session: aiohttp.ClientSession, url: str) -> str:
        try:
            response = await session.get(url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("%s request failed: %s", self.name, exc)
            raise FetchFailure(f"Error fetching from {self.name}") from exc
        try:
            async with response:
                return await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError, LookupError) as exc:
            logger.warning("%s response could not be read: %s", self.name, exc)
            raise ReadFailure(f"Error reading response from {self.name}") from exc

    async def search(self, session: aiohttp.ClientSession, keyword: str) -> List[str]:
        url = self.build_url(keyword)
        logger.debug("Searching %s: %s", self.name, url)
        body = await self.fetch_text(session, url)
        return self.parse(body, keyword)

    def parse(self, body: str, keyword: str) -> List[str]:
        raise NotImplementedError


class HtmlSourceAdapter(SourceAdapter):
    """Adapter for sites that answer with an HTML page."""

    def compile_selector(self, selector: str, label: str = "") -> soupsieve.SoupSieve:
        try:
            return soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as exc:
            description = f"{self.name} {label}".strip()
            logger.warning("Bad selector %r for %s: %s", selector, self.name, exc)
            raise ParseFailure(f"Could not parse {description} selector") from exc

    @staticmethod
    def document(body: str) -> BeautifulSoup:
        return BeautifulSoup(body, "html5lib")


__all__ = [
    "FetchFailure",
    "HtmlSourceAdapter",
    "ParseFailure",
    "ReadFailure",
    "SourceAdapter",
    "SourceFailure",
]
