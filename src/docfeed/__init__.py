"""docfeed - document identity and default policy for repository feed connectors."""

__version__ = "0.1.0"
