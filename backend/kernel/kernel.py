"""Microkernel bootstrapper that wires FastAPI, shared settings and plugins."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, get_settings, set_settings

from .plugin import ServicePlugin
from .runtime import set_kernel


CapabilityFactory = Callable[["Kernel"], Any]

logger = logging.getLogger(__name__)


class Kernel:
    """Application runtime that coordinates shared infrastructure and plugins."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        debug: Optional[bool] = None,
        title: str = "Meetings Backend",
    ) -> None:
        self.settings = settings or get_settings()
        set_settings(self.settings)
        self.debug = bool(debug) if debug is not None else False

        self.app = FastAPI(debug=self.debug, title=title)
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._capability_factories: Dict[str, CapabilityFactory] = {}
        self._capability_cache: Dict[str, Any] = {}
        self._registered_plugins: Dict[str, ServicePlugin] = {}

        set_kernel(self)
        self._bootstrap_infrastructure()

    # ------------------------------------------------------------------
    # Capability and dependency management
    # ------------------------------------------------------------------
    def register_capability(self, name: str, factory: CapabilityFactory) -> None:
        """Register a lazily-created capability that other modules can resolve."""

        if name in self._capability_factories:
            raise ValueError(f"Capability '{name}' already registered")
        self._capability_factories[name] = factory

    def resolve(self, name: str) -> Any:
        if name not in self._capability_factories:
            raise KeyError(f"Capability '{name}' is not registered")

        if name in self._capability_cache:
            return self._capability_cache[name]

        instance = self._capability_factories[name](self)
        self._capability_cache[name] = instance
        return instance

    # ------------------------------------------------------------------
    # Router helpers
    # ------------------------------------------------------------------
    def include_router(self, router: APIRouter, *, prefix: str = "") -> None:
        self.app.include_router(router, prefix=prefix)

    # ------------------------------------------------------------------
    # Plugin lifecycle
    # ------------------------------------------------------------------
    def register_plugin(self, plugin: ServicePlugin) -> None:
        if plugin.name in self._registered_plugins:
            raise ValueError(f"Plugin '{plugin.name}' already registered")
        plugin.setup(self)
        self._registered_plugins[plugin.name] = plugin
        logger.debug("Registered plugin %s", plugin.name)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _bootstrap_infrastructure(self) -> None:
        """Initialise shared infrastructure managed by the kernel."""

        level = logging.DEBUG if self.debug else getattr(logging, self.settings.LOG_LEVEL.upper(), logging.INFO)
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


__all__ = ["Kernel"]
