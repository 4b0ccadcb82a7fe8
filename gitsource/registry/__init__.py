"""
Devfile registry lookups.
"""

from gitsource.registry.client import DevfileType, RegistryClient, RegistryEntry

__all__ = [
    "DevfileType",
    "RegistryClient",
    "RegistryEntry",
]
