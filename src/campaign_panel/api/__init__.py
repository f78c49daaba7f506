"""HTTP API routers."""

from campaign_panel.api import campaigns

__all__ = ["campaigns"]
