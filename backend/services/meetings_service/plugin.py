"""Meetings service plugin wiring the provider client, API and page routes."""

from __future__ import annotations

from kernel import Kernel, ServicePlugin

from . import deps
from .router import router
from .views import router as views_router


class MeetingsPlugin(ServicePlugin):
    """Register the provider client capability plus JSON and HTML routes."""

    name = "meetings"

    def setup(self, kernel: Kernel) -> None:  # noqa: D401 - interface requirement
        deps.register_dependencies(kernel)
        kernel.include_router(router, prefix="/api")
        kernel.include_router(views_router)


__all__ = ["MeetingsPlugin"]
