"""Feeds, groups, time topics and CSV data records for an IoT data service."""

__version__ = "0.1.0"