"""Snowplow provider: console metadata data sources and event tracking."""

__version__ = "0.1.0"
