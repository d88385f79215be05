"""Core data models for the Taigi lookup bot."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class OutcomeState(str, Enum):
    FOUND = "found"
    FAILED = "failed"
    EMPTY = "empty"


class ReplyKind(str, Enum):
    TEXT = "text"
    REACTION = "reaction"


@dataclass(frozen=True)
class LookupRequest:
    """A keyword pulled from an inbound chat message."""

    keyword: str

    @classmethod
    def from_text(cls, text: str) -> "LookupRequest":
        return cls(keyword=(text or "").strip())

    @property
    def is_empty(self) -> bool:
        return not self.keyword


@dataclass
class SourceResult:
    source: str
    lines: List[str] = field(default_factory=list)


@dataclass
class SourceError:
    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


@dataclass
class AggregateOutcome:
    """Everything one lookup produced across all sources."""

    keyword: str
    results: List[str] = field(default_factory=list)
    errors: List[SourceError] = field(default_factory=list)

    def add_result(self, result: SourceResult) -> None:
        self.results.extend(result.lines)

    def add_error(self, error: SourceError) -> None:
        self.errors.append(error)

    @property
    def state(self) -> OutcomeState:
        if self.results:
            return OutcomeState.FOUND
        if self.errors:
            return OutcomeState.FAILED
        return OutcomeState.EMPTY


@dataclass(frozen=True)
class Reply:
    """What the bot sends back: a text message or a reaction."""

    kind: ReplyKind
    content: str

    @classmethod
    def text(cls, content: str) -> "Reply":
        return cls(ReplyKind.TEXT, content)

    @classmethod
    def reaction(cls, emoji: str) -> "Reply":
        return cls(ReplyKind.REACTION, emoji)


__all__ = [
    "AggregateOutcome",
    "LookupRequest",
    "OutcomeState",
    "Reply",
    "ReplyKind",
    "SourceError",
    "SourceResult",
]
