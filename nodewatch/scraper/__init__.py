"""Scraper package — page fetch & bandwidth filtering."""

from nodewatch.scraper.bandwidth import extract_bandwidth_mbps
from nodewatch.scraper.fetcher import fetch_url
from nodewatch.scraper.filter import filter_nodes
from nodewatch.scraper.lines import filter_lines
from nodewatch.scraper.models import CandidateRecord, RawPage
from nodewatch.scraper.table import filter_table_rows
from nodewatch.scraper.units import to_mbps

__all__ = [
    "fetch_url",
    "filter_nodes",
    "filter_table_rows",
    "filter_lines",
    "extract_bandwidth_mbps",
    "to_mbps",
    "RawPage",
    "CandidateRecord",
]
