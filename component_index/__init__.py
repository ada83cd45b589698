"""Serverless Devs component index.

Inspect components installed under the Serverless Devs home directory.
"""

__version__ = "1.0.0"

from .models import ComponentEntry, Descriptor, Registry, RegistryListing
from .registries import GITHUB_REGISTRY, REGISTRIES, SERVERLESS_REGISTRY
from .scanner import ComponentScanner

__all__ = [
    "ComponentScanner",
    "ComponentEntry",
    "Descriptor",
    "Registry",
    "RegistryListing",
    "SERVERLESS_REGISTRY",
    "GITHUB_REGISTRY",
    "REGISTRIES",
]
