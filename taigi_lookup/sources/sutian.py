"""Sutian (MOE Taiwanese dictionary) search (HTML).

The results page carries the same entry twice: a stacked table for narrow
screens and a columnar one for desktops. Each layout is described as data and
tried in order; the first layout whose link and pronunciation selectors both
match wins, even when the matched cells turn out to be empty. Only the first
link and the first pronunciation cell are read, so at most one entry comes back.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .base import HtmlSourceAdapter


@dataclass(frozen=True)
class TableLayout:
    label: str
    link: str
    pronunciation: str


LAYOUTS: Tuple[TableLayout, ...] = (
    TableLayout(
        label="mobile",
        link="table.d-md-none tbody tr:nth-child(2) td a",
        pronunciation="table.d-md-none tbody tr:nth-child(3) td",
    ),
    TableLayout(
        label="desktop",
        link="table.d-none.d-md-table tbody tr td:nth-child(2) a",
        pronunciation="table.d-none.d-md-table tbody tr td:nth-child(3)",
    ),
)


def first_line(text: str) -> str:
    """Trim a cell and drop the notes that follow its first line."""

    stripped = text.strip()
    if not stripped:
        return ""
    return stripped.split("\n", 1)[0].strip()


class SutianSource(HtmlSourceAdapter):
    """Reads the headword and its romanization from the Sutian results table."""

    layouts: Tuple[TableLayout, ...] = LAYOUTS

    def parse(self, body: str, keyword: str) -> List[str]:
        compiled = [
            (
                self.compile_selector(layout.link, layout.label),
                self.compile_selector(layout.pronunciation, f"{layout.label} pronunciation"),
            )
            for layout in self.layouts
        ]
        document = self.document(body)

        for link_selector, pronunciation_selector in compiled:
            links = link_selector.select(document)
            pronunciations = pronunciation_selector.select(document)
            if not links or not pronunciations:
                continue

            link, cell = links[0], pronunciations[0]
            word = link.get_text().strip()
            pronunciation = first_line(cell.get_text())
            if not word or not pronunciation:
                return []
            url = self.resolve_url(link.get("href") or "")
            return [f"{self.icon} {word} [{pronunciation}] - {url}"]

        return []


__all__ = ["LAYOUTS", "SutianSource", "TableLayout", "first_line"]
