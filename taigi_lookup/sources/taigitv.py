"""TaigiTV word list search (HTML)."""
from __future__ import annotations

from typing import List

from .base import HtmlSourceAdapter


class TaigiTVSource(HtmlSourceAdapter):
    """Reads the headline links of TaigiTV's word search page."""

    link_selector = ".btngaa .h3 a"

    def parse(self, body: str, keyword: str) -> List[str]:
        selector = self.compile_selector(self.link_selector)
        document = self.document(body)

        results: List[str] = []
        for element in selector.select(document):
            if len(results) >= self.max_results:
                break
            href = element.get("href")
            if href is None:
                continue
            label = element.get_text().strip()
            results.append(f"{self.icon} {label} - {self.resolve_url(href)}")
        return results


__all__ = ["TaigiTVSource"]
