"""Polls a relay listing page and serves the high-bandwidth nodes."""

__version__ = "0.1.0"
