"""Kernel package: application runtime and the plugin contract."""

from .kernel import Kernel
from .plugin import ServicePlugin

__all__ = ["Kernel", "ServicePlugin"]
