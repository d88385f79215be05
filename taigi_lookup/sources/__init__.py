"""Dictionary source adapters, listed in the order their results are shown."""
from __future__ import annotations

from typing import List

from ..config import Settings
from .base import (
    FetchFailure,
    HtmlSourceAdapter,
    ParseFailure,
    ReadFailure,
    SourceAdapter,
    SourceFailure,
)
from .itaigi import ITaigiSource
from .sutian import SutianSource
from .taigitv import TaigiTVSource

SOURCE_TYPES = (
    ("taigitv", TaigiTVSource),
    ("sutian", SutianSource),
    ("itaigi", ITaigiSource),
)


def build_sources(settings: Settings) -> List[SourceAdapter]:
    return [adapter(settings.source(key)) for key, adapter in SOURCE_TYPES]


__all__ = [
    "FetchFailure",
    "HtmlSourceAdapter",
    "ITaigiSource",
    "ParseFailure",
    "ReadFailure",
    "SOURCE_TYPES",
    "SourceAdapter",
    "SourceFailure",
    "SutianSource",
    "TaigiTVSource",
    "build_sources",
]
