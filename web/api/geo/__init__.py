"""Geo API."""

from web.api.geo.views import router

__all__ = ["router"]
