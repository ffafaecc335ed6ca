"""Bandwidth extraction from a single line or table cell.

Two strategies, tried in order:

1. *Keyword form*: a label (``带宽``, ``bandwidth`` or ``bw``) followed by a
   figure, e.g. ``带宽:250M`` or ``bandwidth = 0.5 Gbps``.
2. *Token form*: a bare figure such as ``250M`` standing as a whole token
   between whitespace, commas, pipes or semicolons.

The first hit of the first strategy that matches is normalised to Mbps.
"""

from __future__ import annotations

import re
from typing import Optional

from nodewatch.scraper.units import to_mbps

_NUMBER = r"([0-9]+(?:\.[0-9]+)?)"

_KEYWORD_RE = re.compile(
    r"(?:带宽|bandwidth|bw)\s*[:=]?\s*" + _NUMBER + r"\s*([mg])(?:bps)?",
    re.IGNORECASE,
)
_TOKEN_RE = re.compile(_NUMBER + r"\s*([mg])(?:bps)?", re.IGNORECASE)
_SPLIT_RE = re.compile(r"[\s,|;]+")


def extract_bandwidth_mbps(text: str) -> Optional[float]:
    """Return the bandwidth mentioned in *text* in Mbps, or ``None``."""
    match = _KEYWORD_RE.search(text)
    if match:
        return to_mbps(match.group(1), match.group(2))

    for token in _SPLIT_RE.split(text):
        if not token:
            continue
        match = _TOKEN_RE.fullmatch(token)
        if match:
            return to_mbps(match.group(1), match.group(2))

    return None
