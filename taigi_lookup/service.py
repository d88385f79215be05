"""Lookup service: fans a keyword out to every source and builds the reply."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import aiohttp

from .config import Settings, get_settings
from .formatter import format_reply, prompt_reply
from .models import AggregateOutcome, LookupRequest, Reply, SourceError, SourceResult
from .sources import SourceAdapter, SourceFailure, build_sources

logger = logging.getLogger(__name__)


class LookupService:
    """Runs one lookup per inbound message. Holds no per-request state."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        sources: Optional[Sequence[SourceAdapter]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.sources: List[SourceAdapter] = (
            list(sources) if sources is not None else build_sources(self.settings)
        )

    async def search(
        self,
        keyword: str,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> AggregateOutcome:
        """Query every source concurrently and wait for all of them."""

        if session is None:
            async with aiohttp.ClientSession() as owned:
                return await self._gather(keyword, owned)
        return await self._gather(keyword, session)

    async def _gather(self, keyword: str, session: aiohttp.ClientSession) -> AggregateOutcome:
        settled = await asyncio.gather(
            *(source.search(session, keyword) for source in self.sources),
            return_exceptions=True,
        )

        outcome = AggregateOutcome(keyword=keyword)
        for source, result in zip(self.sources, settled):
            if isinstance(result, SourceFailure):
                logger.warning("%s lookup for %r failed: %s", source.name, keyword, result)
                outcome.add_error(SourceError(source.name, str(result)))
            elif isinstance(result, BaseException):
                logger.error(
                    "Unexpected error searching %s for %r",
                    source.name,
                    keyword,
                    exc_info=result,
                )
                outcome.add_error(SourceError(source.name, f"Unexpected error from {source.name}"))
            else:
                outcome.add_result(SourceResult(source.name, result))
        logger.debug(
            "Lookup %r: %d result(s), %d error(s)",
            keyword,
            len(outcome.results),
            len(outcome.errors),
        )
        return outcome

    async def handle(
        self,
        request: LookupRequest,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> Reply:
        if request.is_empty:
            return prompt_reply(self.settings.empty_keyword_prompt)
        outcome = await self.search(request.keyword, session=session)
        return format_reply(outcome, no_result_reaction=self.settings.no_result_reaction)


__all__ = ["LookupService"]
