"""Admin geo API."""

from web.api.admin.views import router

__all__ = ["router"]
