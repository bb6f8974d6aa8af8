# application/extractor.py
"""
HTML -> surowe kolumny tabeli stawek VAT.

The page lists one row per country: the first cell holds the country name,
the second the standard rate. Both cells may carry footnote markers in
nested elements (``<sup>``, ``<span>``), so only the first text-bearing node
of a cell is used.
"""

from __future__ import annotations

from typing import List, Tuple

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from application.normalizer import pair_rows
from domain.errors import StructuralMismatch
from domain.models import RawRow

# bez "tbody" – html.parser nie dodaje go sam, gdy brakuje go w źródle
ROWS_SELECTOR = "table.table-vat-rates tr"


def first_text_node(cell: Tag) -> str:
    """Return the stripped text of the cell's first node that carries text.

    ``<td>19<sup>(note)</sup></td>`` gives ``"19"``; the annotation is dropped.
    """
    for child in cell.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, Tag):
            text = child.get_text()
        elif isinstance(child, NavigableString):
            text = str(child)
        else:
            continue
        if text.strip():
            return text.strip()
    return ""


def _select_rows(html: str) -> List[Tag]:
    soup = BeautifulSoup(html, "html.parser")
    rows = [row for row in soup.select(ROWS_SELECTOR) if row.find_parent(["thead", "tfoot"]) is None]
    if not rows:
        raise StructuralMismatch(f"No rows found for selector {ROWS_SELECTOR!r}")
    return rows


def extract_columns(html: str) -> Tuple[List[str], List[str]]:
    """Names and rates as two independent selections, in document order."""
    rows = _select_rows(html)
    names = [first_text_node(td) for row in rows for td in row.select("td:first-child")]
    rates = [first_text_node(td) for row in rows for td in row.select("td:nth-child(2)")]
    if not names and not rates:
        raise StructuralMismatch("VAT rates table has rows but no data cells")
    return names, rates


def extract_rows(html: str) -> List[RawRow]:
    names, rates = extract_columns(html)
    return pair_rows(names, rates)
