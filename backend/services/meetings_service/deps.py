"""Dependency registration for the meetings service."""

from __future__ import annotations

from kernel import Kernel
from kernel.runtime import get_kernel

from .client import SignedAPIClient
from .schemas import Credentials


CAPABILITY_API_CLIENT = "capability.meetings.api_client"


def _create_api_client(kernel: Kernel) -> SignedAPIClient:
    settings = kernel.settings
    return SignedAPIClient(
        Credentials.from_settings(settings),
        timeout=settings.API_TIMEOUT_SECONDS,
    )


def register_dependencies(kernel: Kernel) -> None:
    """Register kernel capabilities consumed by the meetings service."""

    kernel.register_capability(CAPABILITY_API_CLIENT, _create_api_client)


def get_api_client() -> SignedAPIClient:
    """FastAPI dependency resolving the shared provider client."""

    kernel = get_kernel()
    return kernel.resolve(CAPABILITY_API_CLIENT)
