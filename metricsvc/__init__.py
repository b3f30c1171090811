"""HTTP service for registering metrics and recording their readings, kept in memory."""

__version__ = "0.1.0"