"""Line-based fallback filter for pages without a usable results table."""

from __future__ import annotations

from typing import List

from nodewatch.scraper.bandwidth import extract_bandwidth_mbps
from nodewatch.scraper.models import CandidateRecord


def filter_lines(content: str, threshold_mbps: float) -> List[str]:
    """Return the trimmed, non-blank lines of *content* above *threshold_mbps*.

    Qualifying lines are kept verbatim, in input order.
    """
    result: List[str] = []
    for line in content.split("\n"):
        record = CandidateRecord(text=line.strip())
        if not record.text:
            continue
        mbps = extract_bandwidth_mbps(record.text)
        if mbps is None or mbps <= threshold_mbps:
            continue
        result.append(record.render())
    return result
