"""Plugin contract for services that participate in the kernel."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .kernel import Kernel


class ServicePlugin(ABC):
    """Base contract every service plugin implements."""

    name: str

    @abstractmethod
    def setup(self, kernel: "Kernel") -> None:
        """Register capabilities and routers on the kernel."""


__all__ = ["ServicePlugin"]
