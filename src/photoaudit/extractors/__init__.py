"""Embedded-metadata providers for photoaudit."""

import logging

from photoaudit.extractors.base import BaseMetadataProvider, EmbeddedMetadata
from photoaudit.extractors.pillow import PillowMetadata, PillowMetadataProvider

logger = logging.getLogger(__name__)

# All provider classes (order doesn't matter, priority is used)
_PROVIDERS: list[type[BaseMetadataProvider]] = [
    PillowMetadataProvider,
]


def get_available_providers() -> list[BaseMetadataProvider]:
    """Get list of available provider instances, sorted by priority.

    Returns:
        List of provider instances that are available on this system,
        sorted by priority (lowest first).
    """
    available = []
    for provider_cls in _PROVIDERS:
        try:
            if provider_cls.is_available():
                available.append(provider_cls())
        except Exception as e:
            logger.debug("Skipping provider %s: %s", provider_cls.name, e)

    available.sort(key=lambda x: x.priority)
    return available


def get_default_provider() -> BaseMetadataProvider:
    """Return the highest-priority available provider.

    Raises:
        RuntimeError: If no provider is available
    """
    providers = get_available_providers()
    if not providers:
        raise RuntimeError("No embedded-metadata provider is available")
    return providers[0]


def get_provider_status() -> dict[str, bool]:
    """Get availability status of all providers.

    Returns:
        Dict mapping provider names to availability status.
    """
    status = {}
    for provider_cls in _PROVIDERS:
        try:
            status[provider_cls.name] = provider_cls.is_available()
        except Exception:
            status[provider_cls.name] = False
    return status


__all__ = [
    # Base classes
    "BaseMetadataProvider",
    "EmbeddedMetadata",
    # Providers
    "PillowMetadataProvider",
    "PillowMetadata",
    # Functions
    "get_available_providers",
    "get_default_provider",
    "get_provider_status",
]
