"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Display prefix for table-sourced records, whichever keyword the page used.
BANDWIDTH_LABEL = "带宽"


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class CandidateRecord:
    """One line of text, or one table row, that may carry a bandwidth figure.

    ``text`` is the span handed to the bandwidth extractor.  Table rows also
    carry the ``identifier`` from their second column and render as
    ``"<identifier> 带宽:<text>"``; free-text lines render verbatim.
    """

    text: str
    identifier: Optional[str] = None

    def render(self) -> str:
        if self.identifier is None:
            return self.text
        return f"{self.identifier} {BANDWIDTH_LABEL}:{self.text}"
