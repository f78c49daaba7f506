"""Campaign admin panel: REST API and client for managing reward campaigns."""

__version__ = "1.0.0"
