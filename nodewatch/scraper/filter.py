"""Filtering orchestrator: table-aware path first, free-text lines second."""

from __future__ import annotations

from typing import List

from nodewatch.scraper.lines import filter_lines
from nodewatch.scraper.table import filter_table_rows


def filter_nodes(content: str, threshold_mbps: float) -> List[str]:
    """Return the records in *content* whose bandwidth exceeds *threshold_mbps*.

    The results table is treated as authoritative whenever it yields at
    least one record.  Otherwise the whole document is scanned line by line.
    A table whose rows all fall at or below the threshold therefore also
    falls through to the line scan.
    """
    rows = filter_table_rows(content, threshold_mbps)
    if rows:
        return rows
    return filter_lines(content, threshold_mbps)
