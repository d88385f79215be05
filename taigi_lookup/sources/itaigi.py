"""iTaigi crowd-sourced dictionary search (JSON API)."""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from .base import ParseFailure, SourceAdapter

logger = logging.getLogger(__name__)


class JsonView:
    """Read-only view over a decoded JSON value with per-field defaults.

    Lookups on anything that is not an object behave like missing keys, so a
    malformed entry degrades to defaults instead of failing the whole search.
    """

    def __init__(self, value: Any) -> None:
        self.value = value

    def _get(self, key: str) -> Any:
        if isinstance(self.value, dict):
            return self.value.get(key)
        return None

    def text(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._get(key)
        return value if isinstance(value, str) else default

    def integer(self, key: str, default: int = 0) -> int:
        value = self._get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value

    def items(self, key: str) -> List["JsonView"]:
        value = self._get(key)
        if not isinstance(value, list):
            return []
        return [JsonView(item) for item in value]


class ITaigiSource(SourceAdapter):
    """Reads suggested Taigi words for a Mandarin keyword from iTaigi."""

    entry_url = "https://itaigi.tw/k/{foreign}"

    def parse(self, body: str, keyword: str) -> List[str]:
        try:
            root = JsonView(json.loads(body))
        except ValueError as exc:
            logger.warning("%s returned invalid JSON: %s", self.name, exc)
            raise ParseFailure(f"Error parsing JSON from {self.name}") from exc

        results = self._parse_entries(root)
        if not results:
            results = self._parse_suggestions(root, keyword)
        return results

    def _parse_entries(self, root: JsonView) -> List[str]:
        template = self.settings.entry_url or self.entry_url
        results: List[str] = []
        for item in root.items("列表")[: self.max_results]:
            foreign = item.text("外語資料", "N/A")
            words = item.items("新詞文本")
            if not words:
                continue
            word = words[0]
            text = word.text("文本資料", "N/A")
            pronunciation = word.text("音標資料", "N/A")
            contributor = word.text("貢獻者", "匿名")
            good = word.integer("按呢講好")
            bad = word.integer("按呢無好")
            url = template.format(foreign=foreign)
            results.append(
                f"{self.icon} {foreign} → {text} [{pronunciation}] "
                f"(👍{good} 👎{bad}) by {contributor} - {url}"
            )
        return results

    def _parse_suggestions(self, root: JsonView, keyword: str) -> List[str]:
        results: List[str] = []
        for suggestion in root.items("其他建議")[: self.max_results]:
            text = suggestion.text("文本資料", "N/A")
            pronunciation = suggestion.text("音標資料", "N/A")
            foreign_words = [
                value
                for value in (
                    entry.text("外語資料")
                    for entry in suggestion.items("按呢講的外語列表")[:2]
                )
                if value is not None
            ]
            subject = ", ".join(foreign_words) if foreign_words else keyword
            results.append(
                f"{self.icon} {subject} → {text} [{pronunciation}] (建議) - "
                f"{self.settings.site_root}"
            )
        return results


__all__ = ["ITaigiSource", "JsonView"]
