"""Table-aware row filter for the relay listing page.

The page renders its results as ``<div id="result"><table>…<tbody>`` with one
``<tr>`` per node and at least six cells per row: index, IP, three columns
we ignore, bandwidth.  Blocks are located with regular expressions rather
than a DOM parser, so nested tables or broken markup inside the target table
can produce wrong or missing rows.
"""

from __future__ import annotations

import re
from typing import Iterator, List

from nodewatch.scraper.bandwidth import extract_bandwidth_mbps
from nodewatch.scraper.models import CandidateRecord

_RESULT_ANCHORS = ('id="result"', "id='result'")

_TABLE_RE = re.compile(r"<table\b[^>]*>(.*?)</table>", re.IGNORECASE | re.DOTALL)
_TBODY_RE = re.compile(r"<tbody\b[^>]*>(.*?)</tbody>", re.IGNORECASE | re.DOTALL)
_ROW_RE = re.compile(r"<tr\b[^>]*>(.*?)</tr>", re.IGNORECASE | re.DOTALL)
_CELL_RE = re.compile(r"<td\b[^>]*>(.*?)</td>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>", re.DOTALL)

_ENTITIES = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&#39;": "'",
    "&quot;": '"',
}
_ENTITY_RE = re.compile("|".join(re.escape(e) for e in _ENTITIES))

_MIN_CELLS = 6
_IDENTIFIER_CELL = 1
_BANDWIDTH_CELL = 5


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _result_region(html: str) -> str:
    """Return *html* from the first results anchor onward (or all of it)."""
    positions = [pos for pos in (html.find(a) for a in _RESULT_ANCHORS) if pos >= 0]
    if not positions:
        return html
    return html[min(positions):]


def _clean_cell(cell: str) -> str:
    """Strip tags, decode the handful of entities the page uses, and trim.

    Entities are decoded in a single pass so ``&amp;lt;`` becomes ``&lt;``,
    not ``<``.
    """
    text = _TAG_RE.sub("", cell)
    text = _ENTITY_RE.sub(lambda m: _ENTITIES[m.group(0)], text)
    return text.strip()


def _iter_table_records(html: str) -> Iterator[CandidateRecord]:
    """Yield one record per usable ``<tr>`` of the results table's body."""
    table = _TABLE_RE.search(_result_region(html))
    if not table:
        return
    tbody = _TBODY_RE.search(table.group(1))
    if not tbody:
        return

    for row in _ROW_RE.finditer(tbody.group(1)):
        cells = _CELL_RE.findall(row.group(1))
        if len(cells) < _MIN_CELLS:
            continue
        identifier = _clean_cell(cells[_IDENTIFIER_CELL])
        bandwidth = _clean_cell(cells[_BANDWIDTH_CELL])
        if not identifier or not bandwidth:
            continue
        yield CandidateRecord(text=bandwidth, identifier=identifier)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def filter_table_rows(html: str, threshold_mbps: float) -> List[str]:
    """Return ``"<ip> 带宽:<bandwidth>"`` for each row above *threshold_mbps*.

    Returns an empty list when the page has no results table, the table has
    no ``<tbody>``, or no row qualifies.
    """
    result: List[str] = []
    for record in _iter_table_records(html):
        mbps = extract_bandwidth_mbps(record.text)
        if mbps is None or mbps <= threshold_mbps:
            continue
        result.append(record.render())
    return result
