"""Data model and helpers for Tvheadend HTSP clients: channels, tags, EPG events,
recordings and recording rules, stream status records, lifetime conversion,
logging and sync-state tracking."""

__version__ = "0.1.0"